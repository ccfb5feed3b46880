# -*- coding: utf-8 -*-
"""
HTML report rendering for BEP documents.

Produces a self-contained page (inline CSS) with a metadata block, one
heading and table per section, the RACI matrix and a footer. The report is
for reading and printing, not for re-import.
"""

from datetime import datetime
from enum import Enum
from html import escape
from typing import Iterable, List, Optional, Sequence, Tuple

from app.config import Config
from models import BEPDocument
from utils.datetime_utils import to_isoformat, utc_now


REPORT_CSS = """
    body { font-family: 'Segoe UI', system-ui, sans-serif; max-width: 900px; margin: 0 auto; padding: 40px 20px; color: #1e293b; line-height: 1.6; }
    h1 { color: #1e3a5f; border-bottom: 3px solid #2563eb; padding-bottom: 10px; }
    h2 { color: #1e3a5f; margin-top: 30px; border-bottom: 1px solid #e2e8f0; padding-bottom: 8px; }
    h3 { color: #334155; }
    table { border-collapse: collapse; width: 100%; margin: 15px 0; }
    th, td { border: 1px solid #e2e8f0; padding: 8px 12px; text-align: left; font-size: 14px; }
    th { background: #f1f5f9; font-weight: 600; }
    .meta { background: #f8fafc; padding: 15px; border-radius: 8px; margin: 20px 0; }
    .meta span { display: inline-block; margin-right: 30px; }
    .meta label { font-weight: 600; color: #64748b; font-size: 12px; text-transform: uppercase; }
    .section { margin: 25px 0; }
    .badge { display: inline-block; padding: 2px 8px; border-radius: 4px; font-size: 12px; font-weight: 600; }
    .badge-blue { background: #dbeafe; color: #1d4ed8; }
    .badge-green { background: #dcfce7; color: #166534; }
    .footer { margin-top: 40px; padding-top: 20px; border-top: 1px solid #e2e8f0; font-size: 12px; color: #94a3b8; }
"""


class _Cells:
    """Escapes values and substitutes the empty-value placeholder."""

    def __init__(self, empty_value: str):
        self.empty_value = empty_value

    def __call__(self, value) -> str:
        if isinstance(value, Enum):
            value = value.value
        if value is None or value == "":
            return escape(self.empty_value)
        return escape(str(value))

    def join(self, values: Iterable[str], separator: str) -> str:
        return self(separator.join(values))


def _key_value_table(rows: Sequence[Tuple[str, str]]) -> str:
    body = "\n".join(f"    <tr><th>{escape(label)}</th><td>{value}</td></tr>" for label, value in rows)
    return f"  <table>\n{body}\n  </table>"


def _list_table(headers: Sequence[str], rows: List[Sequence[str]]) -> str:
    head = "".join(f"<th>{escape(h)}</th>" for h in headers)
    body = "".join("<tr>" + "".join(f"<td>{cell}</td>" for cell in row) + "</tr>" for row in rows)
    return (
        "  <table>\n"
        f"    <thead><tr>{head}</tr></thead>\n"
        f"    <tbody>{body}</tbody>\n"
        "  </table>"
    )


def render_html_report(
    document: BEPDocument,
    generated_at: Optional[datetime] = None,
    empty_value: Optional[str] = None
) -> str:
    """
    Render a BEP as a standalone HTML report.

    Args:
        document: Document to render (not modified)
        generated_at: Generation time shown in the header and footer (default: now)
        empty_value: Placeholder for empty fields (default: Config.EMPTY_VALUE)

    Returns:
        Complete HTML page
    """
    generated_at = generated_at or utc_now()
    cell = _Cells(Config.EMPTY_VALUE if empty_value is None else empty_value)

    info = document.project_information
    eir = document.information_requirements.eir
    loin = document.level_of_information_need
    cde = document.cde_configuration
    standards = document.standards_methods
    sw = document.software_it
    dm = document.deliverables_and_milestones
    rr = document.roles_and_responsibilities

    client_contact = f"{info.client_contact} ({info.client_email})" if (
        info.client_contact or info.client_email) else ""

    parts = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '  <meta charset="UTF-8">',
        f"  <title>BIM Execution Plan - {escape(info.project_name)}</title>",
        f"  <style>{REPORT_CSS}  </style>",
        "</head>",
        "<body>",
        "  <h1>BIM Execution Plan (BEP)</h1>",
        '  <div class="meta">',
        f"    <span><label>Project</label><br>{cell(info.project_name)}</span>",
        f"    <span><label>Number</label><br>{cell(info.project_number)}</span>",
        f"    <span><label>Version</label><br>{cell(document.version)}</span>",
        f'    <span><label>Status</label><br><span class="badge badge-blue">{cell(document.status)}</span></span>',
        f"    <span><label>Date</label><br>{escape(generated_at.strftime(Config.DATE_FORMAT_DISPLAY))}</span>",
        "  </div>",
        "",
        "  <h2>1. Project Information</h2>",
        _key_value_table([
            ("Project Name", cell(info.project_name)),
            ("Project Number", cell(info.project_number)),
            ("Address", cell(info.project_address)),
            ("Description", cell(info.project_description)),
            ("Type", cell(info.project_type)),
            ("Value", cell(info.project_value)),
            ("Procurement Route", cell(info.procurement_route)),
            ("RIBA Stage", cell(info.project_stage)),
            ("Client", cell(info.client_organisation)),
            ("Client Contact", cell(client_contact)),
        ]),
        "",
        "  <h2>2. Project Parties</h2>",
        _list_table(
            ["Organisation", "Role", "Contact", "BIM Capability", "Scope"],
            [
                [cell(p.organisation_name), cell(p.role),
                 cell(f"{p.contact_name} ({p.contact_email})" if (p.contact_name or p.contact_email) else ""),
                 cell(p.bim_capability), cell(p.scope)]
                for p in document.project_parties
            ],
        ),
        "",
        "  <h2>3. Information Requirements</h2>",
        "  <h3>EIR</h3>",
        _key_value_table([
            ("Information Standard", cell(eir.information_standard)),
            ("Production Methods", cell(eir.information_production_methods)),
            ("Acceptance Criteria", cell(eir.acceptance_criteria)),
        ]),
        "",
        "  <h2>4. Level of Information Need</h2>",
        _list_table(
            ["Element", "Geometry", "Information", "Documentation", "Purpose"],
            [
                [cell(e.element_type), cell(e.geometrical_information.level),
                 cell(e.alphanumeric_information.level), cell(e.documentation.level),
                 cell(e.purpose)]
                for e in loin.elements
            ],
        ),
        "",
        "  <h2>5. Common Data Environment</h2>",
        _key_value_table([
            ("Platform", cell(cde.platform)),
            ("Naming Convention", cell(cde.naming_convention.example)),
            ("Revision Strategy", cell(cde.revision_strategy)),
        ]),
        "",
        "  <h2>6. Standards &amp; Methods</h2>",
        _key_value_table([
            ("Classification", cell(standards.classification_system)),
            ("Units", cell(standards.measurement_units)),
            ("Modelling Standards", cell.join(standards.modelling_standards, ", ")),
            ("Drawing Standards", cell.join(standards.drawing_standards, ", ")),
        ]),
        "",
        "  <h2>7. Software &amp; IT</h2>",
        _list_table(
            ["Software", "Version", "Purpose", "Discipline"],
            [
                [cell(s.name), cell(s.version), cell(s.purpose), cell(s.discipline)]
                for s in [*sw.authoring_software, *sw.coordination_software]
            ],
        ),
        "",
        "  <h2>8. Deliverables &amp; Milestones</h2>",
        _list_table(
            ["Milestone", "Date", "Stage", "Description"],
            [
                [cell(m.name), cell(m.date), cell(m.stage), cell(m.description)]
                for m in dm.information_delivery_milestones
            ],
        ),
        "",
        "  <h2>9. Roles &amp; Responsibilities</h2>",
        _list_table(
            ["Role", "Person", "Organisation", "Responsibilities"],
            [
                [cell(r.title), cell(r.person_name), cell(r.organisation),
                 cell.join(r.responsibilities, "; ")]
                for r in rr.roles
            ],
        ),
        "",
        "  <h3>RACI Matrix</h3>",
        _list_table(
            ["Activity", "R", "A", "C", "I"],
            [
                [cell(r.activity), cell(r.responsible), cell(r.accountable),
                 cell(r.consulted), cell(r.informed)]
                for r in rr.raci_matrix
            ],
        ),
        "",
        '  <div class="footer">',
        "    <p>Generated by Bailey ISO 19650 Dashboard &mdash; BEP Generator</p>",
        "    <p>This document has been prepared in accordance with BS EN ISO 19650-1 "
        "and BS EN ISO 19650-2.</p>",
        f"    <p>Document ID: {escape(document.id)} | Version: {escape(document.version)} | "
        f"Generated: {escape(to_isoformat(generated_at))}</p>",
        "  </div>",
        "</body>",
        "</html>",
    ]
    return "\n".join(parts)
