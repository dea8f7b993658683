"""Tests for health response models."""

from weather_lookup.models import ReadinessResponse, ReadinessStatus


def test_readiness_all_checks_pass():
    """Test every passing check gives READY."""
    readiness = ReadinessResponse.from_checks("1.0.0", {"http_client": True, "weather_api_key": True}, True)

    assert readiness.status is ReadinessStatus.READY
    assert readiness.weather_loaded is True
    assert readiness.timestamp.tzinfo is not None


def test_readiness_failed_check():
    """Test a single failing check gives NOT_READY."""
    readiness = ReadinessResponse.from_checks("1.0.0", {"http_client": False, "weather_api_key": True}, False)

    assert readiness.status is ReadinessStatus.NOT_READY
    assert readiness.model_dump(mode="json")["status"] == "not_ready"
