# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging

from starling.log import resolve_level, setup_logging


def test_resolve_level_from_argument_and_env(monkeypatch):
    monkeypatch.delenv("STARLING_LOG_LEVEL", raising=False)
    assert resolve_level() == logging.WARNING
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(logging.ERROR) == logging.ERROR

    monkeypatch.setenv("STARLING_LOG_LEVEL", "info")
    assert resolve_level() == logging.INFO

    monkeypatch.setenv("STARLING_LOG_LEVEL", "chatty")
    assert resolve_level() == logging.WARNING


def test_setup_logging_quiets_transport_loggers():
    assert setup_logging("INFO") == logging.INFO
    assert logging.getLogger("starling").level == logging.INFO
    assert logging.getLogger("httpx").level == logging.WARNING

    setup_logging("DEBUG")
    assert logging.getLogger("httpx").level == logging.DEBUG
