"""OTP settings routes."""

from __future__ import annotations

from typing import Callable

from flask import flash, jsonify, redirect, render_template, request, url_for

from ...errors import RetrievalError, ValidationError
from ...extensions import get_settings_service
from ...models import SettingUpdate
from ...services.otp_settings import OperationResult
from . import bp
from .forms import OTPSettingsForm

UpdateStrategy = Callable[[list[SettingUpdate]], OperationResult]


def _prefers_json_response() -> bool:
    accepts = request.accept_mimetypes
    if request.is_json:
        return True
    return bool(accepts) and accepts["application/json"] > accepts["text/html"]


def _bind_form() -> OTPSettingsForm:
    if request.is_json:
        return OTPSettingsForm.from_json(request.get_json(silent=True))
    return OTPSettingsForm.from_form(request.form)


def _validation_failure(errors: list[str]):
    if _prefers_json_response():
        return (
            jsonify({"success": False, "message": "Invalid OTP settings input.", "errors": errors}),
            400,
        )
    for message in errors:
        flash(message, "danger")
    return redirect(url_for("otp_settings.index"))


def _run_update(strategy: UpdateStrategy):
    form = _bind_form()
    if not form.validate():
        return _validation_failure(form.error_messages())

    try:
        result = strategy(form.updates)
    except ValidationError as exc:
        return _validation_failure(exc.errors)

    if _prefers_json_response():
        return jsonify(result.to_dict()), 200 if result.success else 500

    flash(result.message, "success" if result.success else "danger")
    return redirect(url_for("otp_settings.index"))


@bp.get("/")
def index():
    """Show every OTP setting, seeding the defaults on first visit."""

    error = None
    try:
        settings = get_settings_service().get_settings()
    except RetrievalError as exc:
        settings = []
        error = exc.message

    if _prefers_json_response():
        if error:
            return jsonify({"success": False, "message": error, "data": []}), 500
        return jsonify({"success": True, "data": [setting.to_dict() for setting in settings]})

    return render_template("otp_settings/index.html", settings=settings, error=error)


@bp.post("/update")
def update():
    """Update flags by loading and saving each setting."""

    return _run_update(get_settings_service().update_via_record_semantics)


@bp.post("/update-direct")
def update_direct():
    """Update flags with parameterized UPDATE statements."""

    return _run_update(get_settings_service().update_via_direct_statement)


@bp.get("/raw")
def raw():
    """Machine-readable listing for programmatic consumers."""

    try:
        settings = get_settings_service().list_settings()
    except RetrievalError as exc:
        return jsonify({"success": False, "message": exc.message}), 500
    return jsonify({"success": True, "data": [setting.to_dict() for setting in settings]})
