import sys
import logging
from src.config.settings import settings

def setup_logging():
    """配置日志系统"""
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.LOG_LEVEL)
    
    # 清除现有的 handlers
    root_logger.handlers = []
    
    # 创建控制台 handler
    handler = logging.StreamHandler(sys.stdout)
    
    # 设置格式
    if settings.LOG_JSON_FORMAT:
        formatter = logging.Formatter(
            '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", "message": "%(message)s"}'
        )
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
