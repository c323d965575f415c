"""Archive search and export formats."""

import io
import json
from datetime import datetime, timezone

import pytest
from openpyxl import load_workbook

from fieldreports.models.report import ReportResponse
from fieldreports.services import archive, export

LIBRARY = "متابعة المكتبة"


def make_report(**overrides) -> ReportResponse:
    data = {
        "id": 1,
        "teacher_name": "Ahmed Ali",
        "department": LIBRARY,
        "details": "",
        "status": "pending",
        "created_at": datetime(2026, 10, 18, 9, 15, tzinfo=timezone.utc),
    }
    data.update(overrides)
    return ReportResponse(**data)


def test_filter_reports_blank_term_keeps_all():
    reports = [make_report(id=1), make_report(id=2)]
    assert archive.filter_reports(reports, None) == reports
    assert archive.filter_reports(reports, "  ") == reports


def test_filter_reports_matches_searchable_fields():
    reports = [
        make_report(id=1, teacher_name="Ahmed Ali"),
        make_report(id=2, teacher_name="Mona", details="broken Ahmed shelves"),
        make_report(id=3, teacher_name="Sara", school_name="مدرسة النصر"),
        make_report(id=4, teacher_name="Omar", school_id="SCH-9"),
    ]
    assert [r.id for r in archive.filter_reports(reports, "Ahmed")] == [1, 2]
    assert [r.id for r in archive.filter_reports(reports, "النصر")] == [3]
    assert [r.id for r in archive.filter_reports(reports, "SCH-9")] == [4]
    assert archive.filter_reports(reports, "nothing") == []


def test_spreadsheet_row_formatting():
    report = make_report(status="resolved", location_lat=30.5, principal_phone=None)
    row = archive.spreadsheet_rows([report])[0]
    headers = archive.spreadsheet_headers()
    values = dict(zip(headers, row))
    assert values["المعرف"] == 1
    assert values["هاتف المدير"] == ""
    assert values["الحالة"] == "تم الحل"
    assert values["التاريخ"] == "2026/10/18 09:15"
    assert values["الموقع (خط العرض)"] == 30.5
    assert values["الموقع (خط الطول)"] == "غير محدد"


def test_render_spreadsheet_round_trip():
    data = export.render_spreadsheet([make_report(id=2), make_report(id=1, status="in_progress")])
    workbook = load_workbook(io.BytesIO(data))
    sheet = workbook["التقارير"]
    rows = list(sheet.iter_rows(values_only=True))
    assert rows[0][0] == "المعرف"
    assert [r[0] for r in rows[1:]] == [2, 1]
    assert rows[2][12] == "قيد التنفيذ"


def test_render_archive_html_escapes_content():
    html = export.render_archive_html(
        [make_report(teacher_name="<script>alert(1)</script>", location_lat=30.1, location_lng=31.2)],
        generated_at=datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc),
    )
    assert 'dir="rtl"' in html
    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html
    assert "عدد التقارير: 1" in html
    assert "2026/10/19 12:00" in html
    assert "30.1, 31.2" in html


def test_render_report_html_only_embeds_data_images():
    report = make_report(image_url="javascript:alert(1)")
    assert "javascript:" not in export.render_report_html(report)

    report = make_report(image_url="data:image/png;base64,iVBORw0KGgo=", location_lat=30.0, location_lng=31.0)
    html = export.render_report_html(report)
    assert "data:image/png;base64,iVBORw0KGgo=" in html
    assert "https://www.google.com/maps?q=30.0,31.0" in html


def test_render_backup_is_json_list():
    payload = json.loads(export.render_backup([make_report()]))
    assert payload[0]["teacher_name"] == "Ahmed Ali"
    assert payload[0]["department"] == LIBRARY


@pytest.mark.asyncio
async def test_export_spreadsheet_endpoint(client):
    await client.post("/api/v1/reports", json={"teacher_name": "Ahmed Ali", "department": LIBRARY})
    await client.post("/api/v1/reports", json={"teacher_name": "Mona", "department": LIBRARY})

    response = await client.get("/api/v1/reports/export.xlsx", params={"q": "Mona"})
    assert response.status_code == 200
    assert response.headers["content-type"] == export.XLSX_MEDIA_TYPE
    assert "filename*=UTF-8''" in response.headers["content-disposition"]

    sheet = load_workbook(io.BytesIO(response.content))["التقارير"]
    rows = list(sheet.iter_rows(values_only=True))
    assert len(rows) == 2
    assert rows[1][1] == "Mona"


@pytest.mark.asyncio
async def test_export_html_endpoint(client):
    await client.post("/api/v1/reports", json={"teacher_name": "Ahmed Ali", "department": LIBRARY})
    response = await client.get("/api/v1/reports/export.html")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Ahmed Ali" in response.text


@pytest.mark.asyncio
async def test_backup_endpoint(client):
    await client.post("/api/v1/reports", json={"teacher_name": "Ahmed Ali", "department": LIBRARY})
    response = await client.get("/api/v1/reports/backup.json")
    assert response.status_code == 200
    assert "backup_reports_" in response.headers["content-disposition"]
    assert [r["id"] for r in response.json()] == [1]


@pytest.mark.asyncio
async def test_print_report_endpoint(client):
    await client.post("/api/v1/reports", json={"teacher_name": "Ahmed Ali", "department": LIBRARY})
    response = await client.get("/api/v1/reports/1/print")
    assert response.status_code == 200
    assert "Ahmed Ali" in response.text


@pytest.mark.asyncio
async def test_print_unknown_report(client):
    response = await client.get("/api/v1/reports/42/print")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


@pytest.mark.asyncio
@pytest.mark.parametrize("report_id", [0, 2**63])
async def test_print_out_of_range_report(client, report_id):
    response = await client.get(f"/api/v1/reports/{report_id}/print")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"
