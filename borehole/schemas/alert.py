from pydantic import BaseModel


class AlertOut(BaseModel):
    severity: str = "critical"
    parameter: str
    message: str
    threshold_value: float
    current_value: float
