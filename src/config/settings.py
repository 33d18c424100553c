from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """应用配置"""
    
    # 方法配置
    MAX_PERIOD: int = 65535
    
    # 日志配置
    LOG_LEVEL: str = "INFO"
    LOG_JSON_FORMAT: bool = False
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

settings = Settings()
