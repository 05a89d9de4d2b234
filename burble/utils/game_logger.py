"""
Game Logger Module for Burble Server

This module provides structured logging for user actions, server responses,
and game events. Every entry is a single JSON document so the daily log file
can be parsed line by line.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from .helpers import get_user_identity


class GameLogger:
    """
    Centralized logging system for Burble game server.

    Features:
    - User action tracking with IP identification
    - Server response logging
    - Game event logging (wins, losses, hints)
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
        self.logger = logging.getLogger('burble_game')
        self._configured = False

    def configure(self, log_dir: Optional[str] = None, level: Optional[str] = None) -> None:
        """Point the logger at a new directory/level and rebuild its handlers."""
        if log_dir is not None:
            self.log_dir = Path(log_dir)
        if level is not None:
            self.level = logging.getLevelName(level.upper())
        self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        """Setup the main game logger with file handler."""
        self.log_dir.mkdir(parents=True, exist_ok=True)
        logger = self.logger
        logger.setLevel(self.level)
        logger.propagate = False

        # Prevent duplicate handlers
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        # File handler for detailed logs
        file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
        file_handler.setLevel(self.level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        self._configured = True
        return logger

    @property
    def log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _emit(self, level: int, message: str) -> None:
        if not self._configured:
            self._setup_logger()
        self.logger.log(level, message)

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          user_info: Dict[str, str],
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self,
                        request,
                        action: str,
                        game_id: Optional[str] = None,
                        **kwargs):
        """
        Log user actions with full context.

        Args:
            request: Flask request object
            action: Type of action (e.g., 'new_game', 'submit_guess', 'get_state')
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        details = {
            'game_id': game_id,
            'endpoint': getattr(request, 'endpoint', None),
            'method': getattr(request, 'method', None),
            **kwargs
        }

        log_message = self._create_log_entry('USER_ACTION', action, get_user_identity(request), details)
        self._emit(logging.INFO, log_message)

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            game_id: Optional[str] = None,
                            **kwargs):
        """
        Log server responses with full context.

        Args:
            request: Flask request object
            action: Action that was performed
            success: Whether the action succeeded
            response_data: Data being returned to client
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        details = {
            'game_id': game_id,
            'success': success,
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }

        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, get_user_identity(request), details)
        self._emit(logging.INFO if success else logging.WARNING, log_message)

    def log_game_event(self,
                       game_id: Optional[str],
                       event: str,
                       user_ip: str,
                       **kwargs):
        """
        Log game-specific events (wins, losses, hints, deletions).

        Args:
            game_id: Game identifier
            event: Type of game event (e.g., 'game_won', 'game_lost', 'hint_used')
            user_ip: User's IP address
            **kwargs: Additional game details
        """
        user_info = {'user_ip': user_ip or 'unknown', 'session_id': None}
        details = {
            'game_id': game_id,
            **kwargs
        }

        log_message = self._create_log_entry('GAME_EVENT', event, user_info, details)
        self._emit(logging.INFO, log_message)

    def log_error(self,
                  request,
                  error: Exception,
                  action: str,
                  game_id: Optional[str] = None):
        """Log errors with full context."""
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }

        log_message = self._create_log_entry('ERROR', action, get_user_identity(request), details)
        self._emit(logging.ERROR, log_message)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Summarise game state in response logs; the answer is only ever logged as a flag."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()
        if 'state' in sanitized and isinstance(sanitized['state'], dict):
            state = sanitized['state']
            sanitized['state'] = {
                'attempts_used': state.get('attempts_used'),
                'max_attempts': state.get('max_attempts'),
                'status': state.get('status'),
                'scores': state.get('scores'),
                'answer_revealed': state.get('answer') is not None
            }
        sanitized.pop('hint', None)

        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about today's logged events (useful for monitoring)."""
        log_file = self.log_file
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            'user_actions': 0,
            'server_responses': 0,
            'game_events': 0,
            'errors': 0
        }

        with open(log_file, 'r', encoding='utf-8') as f:
            for line in f:
                if not line.strip():
                    continue
                stats['total_entries'] += 1
                if '"USER_ACTION"' in line:
                    stats['user_actions'] += 1
                elif '"SERVER_RESPONSE' in line:
                    stats['server_responses'] += 1
                elif '"GAME_EVENT"' in line:
                    stats['game_events'] += 1
                elif '"ERROR"' in line:
                    stats['errors'] += 1

        return stats


# Global logger instance
game_logger = GameLogger()
