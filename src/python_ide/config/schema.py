"""Pydantic models for configuration schema."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CODE = """# Welcome to Python IDE
# Write your Python code here and click "Run Code" to execute

print("Hello, World!")

# Try some examples:
name = "Python Developer"
age = 25
print(f"Hello, {name}! You are {age} years old.")

# Example with potential errors (uncomment to test error detection):
# print("Age: " + age)  # TypeError: string + int
# if True  # SyntaxError: missing colon
#     print("Missing colon")

# Math operations
result = 10 + 5 * 2
print(f"10 + 5 * 2 = {result}")
"""


class ExecutorConfig(BaseModel):
    """Mock executor configuration."""

    min_delay: float = Field(1.0, ge=0.0, description="Shortest simulated run, in seconds")
    max_delay: float = Field(2.0, ge=0.0, description="Longest simulated run, in seconds")

    @model_validator(mode="after")
    def check_delay_bounds(self) -> "ExecutorConfig":
        """Ensure the delay range is not inverted."""
        if self.max_delay < self.min_delay:
            raise ValueError(
                f"max_delay ({self.max_delay}) must not be less than min_delay ({self.min_delay})"
            )
        return self


class SessionConfig(BaseModel):
    """Editor session configuration."""

    new_file_template: str = "# New Python file\n\n"
    default_code: str = DEFAULT_CODE
    gate_on_errors: bool = True


class FileLoggingConfig(BaseModel):
    """File logging configuration."""

    enabled: bool = False
    path: Path = Path("python-ide.log")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "console"
    file: FileLoggingConfig = FileLoggingConfig()


class IDEConfig(BaseSettings):
    """Root configuration for Python IDE."""

    executor: ExecutorConfig = ExecutorConfig()
    session: SessionConfig = SessionConfig()
    logging: LoggingConfig = LoggingConfig()

    model_config = SettingsConfigDict(
        env_prefix="PYTHON_IDE_",
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )
