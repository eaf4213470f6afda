"""Unit tests for the SQLModel OTP setting repository."""

from __future__ import annotations

import uuid

import pytest

from otpsettings.errors import StoreError
from otpsettings.models import OTPSetting, SettingUpdate


def _settings(*actions: str) -> list[OTPSetting]:
    return [OTPSetting(id=uuid.uuid4(), action=action) for action in actions]


def test_insert_many_and_list_all(repository):
    repository.insert_many(_settings("Withdrawal", "Checklist All"))

    rows = repository.list_all()

    assert [row.action for row in rows] == ["Checklist All", "Withdrawal"]
    assert all(row.email_enabled is False and row.whatsapp_enabled is False for row in rows)


def test_list_all_orders_unknown_actions_last(repository):
    repository.insert_many(_settings("Zeta", "Reset Password", "Alpha", "Withdrawal"))

    assert [row.action for row in repository.list_all()] == [
        "Withdrawal",
        "Reset Password",
        "Alpha",
        "Zeta",
    ]


def test_get_by_id(repository):
    setting = _settings("Withdrawal")[0]
    setting_id = setting.id
    repository.insert_many([setting])

    fetched = repository.get_by_id(setting_id)

    assert fetched is not None
    assert fetched.action == "Withdrawal"
    assert repository.get_by_id(uuid.uuid4()) is None


def test_update_flags_single(repository):
    setting = _settings("Forgot Password")[0]
    setting_id = setting.id
    repository.insert_many([setting])

    assert repository.update_flags(setting_id, True, True) is True

    fetched = repository.get_by_id(setting_id)
    assert fetched.email_enabled is True
    assert fetched.whatsapp_enabled is True


def test_update_flags_unknown_id_is_noop(repository):
    repository.insert_many(_settings("Withdrawal"))
    before = [row.to_dict() for row in repository.list_all()]

    assert repository.update_flags(uuid.uuid4(), True, True) is False

    assert [row.to_dict() for row in repository.list_all()] == before


def test_update_flags_many_counts_matches(repository):
    settings = _settings("Withdrawal", "Reset Password")
    ids = [setting.id for setting in settings]
    repository.insert_many(settings)

    applied = repository.update_flags_many(
        [
            SettingUpdate(ids[0], email_enabled=True, whatsapp_enabled=False),
            SettingUpdate(uuid.uuid4(), email_enabled=True, whatsapp_enabled=True),
            SettingUpdate(ids[1], email_enabled=False, whatsapp_enabled=True),
        ]
    )

    assert applied == 2
    by_id = {row.id: row for row in repository.list_all()}
    assert (by_id[ids[0]].email_enabled, by_id[ids[0]].whatsapp_enabled) == (True, False)
    assert (by_id[ids[1]].email_enabled, by_id[ids[1]].whatsapp_enabled) == (False, True)


def test_execute_flag_statements_reports_touched_rows(repository):
    settings = _settings("Withdrawal", "Reset Password")
    ids = [setting.id for setting in settings]
    repository.insert_many(settings)

    touched = repository.execute_flag_statements(
        [
            SettingUpdate(ids[0], email_enabled=True, whatsapp_enabled=True),
            SettingUpdate(uuid.uuid4(), email_enabled=True, whatsapp_enabled=True),
        ]
    )

    assert touched == 1
    fetched = repository.get_by_id(ids[0])
    assert fetched.email_enabled is True
    assert fetched.whatsapp_enabled is True
    untouched = repository.get_by_id(ids[1])
    assert untouched.email_enabled is False


def test_execute_flag_statements_rolls_back_on_failure(repository, db_engine, failure_trigger):
    settings = _settings("Checklist All", "Withdrawal", "Forgot Password")
    repository.insert_many(settings)
    failure_trigger(db_engine, "Withdrawal")

    with pytest.raises(StoreError) as excinfo:
        repository.execute_flag_statements(
            [SettingUpdate(setting.id, True, True) for setting in settings]
        )

    assert excinfo.value.original_error is not None
    assert all(not row.email_enabled and not row.whatsapp_enabled for row in repository.list_all())


def test_update_flags_many_rolls_back_on_failure(repository, db_engine, failure_trigger):
    settings = _settings("Checklist All", "Withdrawal", "Forgot Password")
    repository.insert_many(settings)
    failure_trigger(db_engine, "Withdrawal")

    with pytest.raises(StoreError):
        repository.update_flags_many([SettingUpdate(setting.id, True, True) for setting in settings])

    assert all(not row.email_enabled and not row.whatsapp_enabled for row in repository.list_all())


def test_insert_many_duplicate_action_raises_store_error(repository):
    repository.insert_many(_settings("Withdrawal"))

    with pytest.raises(StoreError):
        repository.insert_many(_settings("Withdrawal"))

    assert len(repository.list_all()) == 1


def test_list_all_wraps_database_errors(repository, db_engine):
    with db_engine.begin() as connection:
        connection.exec_driver_sql("DROP TABLE otp_setting")

    with pytest.raises(StoreError):
        repository.list_all()
