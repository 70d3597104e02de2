from news_pipeline.errors import ValidationError


def validate_request(data):
    if not data:
        raise ValidationError("Request data is required")

    if not isinstance(data, dict):
        raise ValidationError("Request data must be a JSON object")

    location = data.get("location")
    if not location:
        raise ValidationError("Location is required. Please provide city, state, and country.")

    if not isinstance(location, dict) or not (
        location.get("city") or location.get("state") or location.get("country")
    ):
        raise ValidationError("At least one of city, state, or country is required in location.")
