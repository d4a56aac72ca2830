"""Configuration data models."""

from typing import Any

from pydantic import BaseModel, Field


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class SolverConfig(BaseModel):
    """Solver configuration."""
    default: str = "cbc"
    timeout: int = Field(60, description="Timeout for solver in seconds")
    msg: bool = Field(False, description="Let the backend print its own log")
    parameters: dict[str, Any] = Field(default_factory=dict)


class ReportingConfig(BaseModel):
    """Solution reporting configuration."""
    tolerance: float = Field(1e-6, description="Relative feasibility tolerance")
    precision: int = Field(2, description="Decimals shown in rendered tables")


class Config(BaseModel):
    """Main configuration container."""
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    solvers: SolverConfig = Field(default_factory=SolverConfig)
    reporting: ReportingConfig = Field(default_factory=ReportingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        return cls.model_validate(data)

    def solver_options(self) -> dict[str, Any]:
        """Options dictionary handed to solver constructors."""
        return {
            "timeout": self.solvers.timeout,
            "msg": self.solvers.msg,
            "parameters": dict(self.solvers.parameters),
        }
