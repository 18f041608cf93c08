import datetime
import os
import json
import threading
from typing import Dict, List, Any, Optional
from collections import deque


class Logger:
    """Process-wide logger writing to console, a memory buffer and, locally, a JSON-lines file."""

    def __init__(self, max_logs: int = 1000):
        self.max_logs = max_logs
        self.logs = deque(maxlen=max_logs)
        self.lock = threading.Lock()

        self.is_local = os.getenv('ENV') == 'LOCAL'
        self.file_logging_enabled = False
        self.log_file = os.getenv('LOG_FILE', os.path.join('logs', 'api.log'))

        if self.is_local:
            self._setup_file_logging()

    def _setup_file_logging(self):
        """Create the log directory and file for local runs."""
        try:
            log_dir = os.path.dirname(self.log_file)
            if log_dir and not os.path.exists(log_dir):
                os.makedirs(log_dir)

            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write('')

            self.file_logging_enabled = True
        except OSError as e:
            print(f'File logging setup failed: {e}')
            self.file_logging_enabled = False

    def _store_in_file(self, log_data: Dict[str, Any]) -> bool:
        if not self.file_logging_enabled:
            return False

        try:
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(json.dumps(log_data, default=str) + '\n')
            return True
        except OSError as e:
            print(f'Failed to store log in file: {e}')
            return False

    def __log(self, level: str, message: str, data: Optional[Dict] = None):
        timestamp = datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        log_entry = {
            'timestamp': timestamp,
            'level': level,
            'message': message,
            'data': data
        }

        print(f'[{timestamp}] [{level}] {message}')

        with self.lock:
            self.logs.append(log_entry)

        if self.file_logging_enabled:
            self._store_in_file(log_entry)

    def debug(self, message: str, data: Optional[Dict] = None):
        self.__log('DEBUG', message, data)

    def info(self, message: str, data: Optional[Dict] = None):
        self.__log('INFO', message, data)

    def warning(self, message: str, data: Optional[Dict] = None):
        self.__log('WARNING', message, data)

    def error(self, message: str, data: Optional[Dict] = None):
        self.__log('ERROR', message, data)

    def log_request_json(self, log_data: Dict[str, Any]):
        """Log a served API request in JSON format."""
        self.info(f'API_CALL: {json.dumps(log_data)}', log_data)

    def log_error_json(self, error_data: Dict[str, Any]):
        """Log a failed API request in JSON format."""
        self.error(f'API_ERROR: {json.dumps(error_data)}', error_data)

    def get_logs(self, level: Optional[str] = None, limit: Optional[int] = None) -> List[Dict]:
        """Get buffered logs, newest first, optionally filtered by level."""
        with self.lock:
            logs = list(self.logs)

        logs.reverse()

        if level:
            logs = [log for log in logs if log.get('level') == level]

        if limit:
            logs = logs[:limit]

        return logs

    def clear_logs(self):
        """Drop everything held in the memory buffer."""
        with self.lock:
            self.logs.clear()


# Global logger instance
logger = Logger()
