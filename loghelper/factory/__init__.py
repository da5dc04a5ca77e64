"""
FastAPI integration for the log helper.
"""

from loghelper.factory.app import configure_app, get_log_helper, setup_log_helper

__all__ = ["configure_app", "setup_log_helper", "get_log_helper"]
