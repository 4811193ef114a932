from flask import request

FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


def get_request_data():
    """Return the request body as a dict, whether it was posted as a form or as JSON"""
    content_type = request.content_type or ""
    if any(form_type in content_type for form_type in FORM_CONTENT_TYPES):
        return request.form.to_dict()

    data = request.get_json(silent=True)
    # a JSON list or scalar carries no fields
    if not isinstance(data, dict):
        return {}
    return data
