"""
Pytest tests for the MCP tools. Tool functions are called directly; the
database is a temporary SQLite file.
"""

from __future__ import annotations

import asyncio

import pytest

from vendor_certification import server
from vendor_certification.db import close_db, init_db


def _run(scenario):
    async def wrapper():
        await init_db()
        try:
            return await scenario()
        finally:
            await close_db()

    return asyncio.run(wrapper())


def test_process_tool_reports_result(sqlite_data_dir):
    async def scenario():
        await server.storage.create_certification_application(
            vendor_id="vendor-1",
            tier_requested="Silver",
            documentation_urls=["https://a/1.pdf"],
            compliance_statements={"hipaa": True},
            application_id="app-1",
        )
        processed = await server.certification_process_application("app-1")
        fetched = await server.certification_get_application("app-1")
        return processed, fetched

    processed, fetched = _run(scenario)

    assert processed["result"]["passed"] is True
    assert processed["result"]["checks"]["deploymentHistoryValid"] is True
    assert processed["summary"] == "PASSED automated checks (score: 100)"
    assert fetched["status"] == "in_review"
    assert fetched["automated_check_details"]["score"] == 100


def test_process_tool_honours_enforcement_setting(sqlite_data_dir, monkeypatch):
    monkeypatch.setenv("CERTIFICATION_ENFORCE_DEPLOYMENT_MINIMUMS", "true")

    async def scenario():
        await server.storage.create_certification_application(
            vendor_id="vendor-1",
            tier_requested="Gold",
            documentation_urls=["https://a/1.pdf", "https://a/2.pdf"],
            compliance_statements={"hipaa": True, "nist": True},
            application_id="app-1",
        )
        return await server.certification_process_application("app-1")

    processed = _run(scenario)
    assert processed["result"]["score"] == 80
    assert processed["result"]["recommendations"] == [
        "Gold tier requires at least 1 active deployment with a health system"
    ]


def test_process_tool_unknown_application(sqlite_data_dir):
    async def scenario():
        await server.certification_process_application("ghost")

    with pytest.raises(ValueError, match="Application not found: ghost"):
        _run(scenario)


def test_list_tool_filters_by_status(sqlite_data_dir):
    async def scenario():
        await server.storage.create_certification_application("vendor-1", "Silver", application_id="app-1")
        await server.certification_process_application("app-1")
        pending = await server.certification_list_applications("pending")
        in_review = await server.certification_list_applications("in_review")
        return pending, in_review

    pending, in_review = _run(scenario)
    assert pending["total"] == 1
    assert pending["applications"][0]["id"] == "app-1"
    assert in_review["total"] == 0


def test_list_tool_rejects_unknown_status(sqlite_data_dir):
    async def scenario():
        await server.certification_list_applications("archived")

    with pytest.raises(ValueError, match="Unknown status"):
        _run(scenario)
