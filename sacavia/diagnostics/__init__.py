"""调试日志。"""

from .logs import get_logs, init_log_buffer, log_api_configuration

__all__ = ["get_logs", "init_log_buffer", "log_api_configuration"]
