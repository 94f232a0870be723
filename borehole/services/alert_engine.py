from borehole.schemas.alert import AlertOut
from borehole.schemas.reading import DEFAULT_THRESHOLDS, Reading, Thresholds


def _ph_threshold(value: float, thresholds: Thresholds) -> float:
    if value < thresholds.ph_min:
        return thresholds.ph_min
    return thresholds.ph_max


def build_threshold_alerts(reading: Reading, thresholds: Thresholds = DEFAULT_THRESHOLDS) -> list[AlertOut]:
    """Return every violated rule, highest priority first."""
    alerts: list[AlertOut] = []

    if reading.water_level > thresholds.water_level_max:
        alerts.append(
            AlertOut(
                parameter="water_level",
                message=f"ALERT: Water level is too high ({reading.water_level:.2f}%)",
                threshold_value=thresholds.water_level_max,
                current_value=reading.water_level,
            )
        )

    if reading.temperature > thresholds.temperature_max:
        alerts.append(
            AlertOut(
                parameter="temperature",
                message=f"ALERT: Temperature is too high ({reading.temperature:.2f}°C)",
                threshold_value=thresholds.temperature_max,
                current_value=reading.temperature,
            )
        )

    if reading.ph < thresholds.ph_min or reading.ph > thresholds.ph_max:
        alerts.append(
            AlertOut(
                parameter="ph",
                message=f"ALERT: pH level is out of safe range ({reading.ph:.2f})",
                threshold_value=_ph_threshold(reading.ph, thresholds),
                current_value=reading.ph,
            )
        )

    if reading.turbidity > thresholds.turbidity_max:
        alerts.append(
            AlertOut(
                parameter="turbidity",
                message=f"ALERT: Turbidity is too high ({reading.turbidity:.2f} NTU)",
                threshold_value=thresholds.turbidity_max,
                current_value=reading.turbidity,
            )
        )

    return alerts


def evaluate_alert(reading: Reading, thresholds: Thresholds = DEFAULT_THRESHOLDS) -> str | None:
    alerts = build_threshold_alerts(reading, thresholds)
    if not alerts:
        return None
    return alerts[0].message
