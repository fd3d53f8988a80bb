from .status_schemas import HealthResponse, ServiceInfoResponse

__all__ = ["HealthResponse", "ServiceInfoResponse"]
