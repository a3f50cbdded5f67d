"""
Helper Functions

Contains utility functions used throughout the application.
"""

from dataclasses import asdict
from typing import Any, Dict, Optional

from flask import request


def get_user_identity(request_obj=None) -> Dict[str, Optional[str]]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request

    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None),  # Set on websocket requests
    }


def outcome_payload(outcome) -> Dict[str, Any]:
    """Flatten a GuessOutcome into a JSON response body."""
    payload = {
        'success': True,
        'correct': outcome.correct,
        'game_over': outcome.game_over,
        'state': asdict(outcome.state),
    }
    if outcome.message:
        payload['message'] = outcome.message
    if outcome.summary:
        payload['summary'] = asdict(outcome.summary)
    return payload
