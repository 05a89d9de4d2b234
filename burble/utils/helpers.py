"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict

from flask import request

from ..models.errors import BurbleError


def get_user_identity(request_obj=None) -> Dict[str, str]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request

    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None)
    }


def error_response(error) -> Dict:
    """JSON body for a failed request; game errors carry their type name."""
    body = {
        'success': False,
        'error': error.message if isinstance(error, BurbleError) else str(error)
    }
    if isinstance(error, BurbleError):
        body['error_type'] = type(error).__name__
    return body
