import io
import sys
from datetime import datetime
from xml.sax.saxutils import escape
from reportlab.lib.pagesizes import A4
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle
from process import check, describe
from structs import CheckResult, CheckStatus, SKIPPED, PRACTICE
from utils import TIMEZONE, format_contest_time

EVIDENCE_HEADER = ["Submission", "Problem", "Verdict", "Participant Type"]

def footer_drawer(handle: str, checked_at: str):
    def draw(canvas, doc):
        width, _ = doc.pagesize
        canvas.saveState()
        canvas.setFont('Helvetica', 8)
        canvas.setFillColor(colors.grey)
        canvas.drawString(doc.leftMargin, 0.4*inch, f"{handle} - checked {checked_at}")
        canvas.drawRightString(width - doc.rightMargin, 0.4*inch, f"Page {doc.page}")
        canvas.restoreState()
    return draw

def evidence_summary(entries: list) -> str:
    skipped = len([e for e in entries if e.verdict == SKIPPED])
    practice = len([e for e in entries if e.participantType == PRACTICE])
    return f"{len(entries)} entries: {skipped} skipped, {practice} practice, none competitive"

def evidence_rows(entries: list):
    rows = [list(EVIDENCE_HEADER)]
    for entry in entries:
        rows.append([
            str(entry.id) if entry.id is not None else "-",
            entry.problem.index or "-",
            entry.verdict or "-",
            entry.participantType or "-",
        ])
    return rows

def contest_title(result: CheckResult, contest_id: int) -> str:
    for contest in result.contests:
        if contest.id == contest_id:
            return f"{contest.id}: {contest.name} ({format_contest_time(contest.startTimeSeconds)})"
    return f"{contest_id}: not listed in contest.list"

EVIDENCE_STYLE = TableStyle([
    ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
    ('FONTSIZE', (0, 0), (-1, -1), 9),
    ('LINEBELOW', (0, 0), (-1, 0), 0.75, colors.black),
    ('ROWBACKGROUNDS', (0, 1), (-1, -1), [colors.white, colors.whitesmoke]),
    ('TEXTCOLOR', (2, 1), (2, -1), colors.darkred),
])

def generate_pdf_report(result: CheckResult, output):
    """
    Write the check result for one handle to `output` (a path or a binary
    file object). Flagged contests get a section listing every entry of the
    handle, which is the evidence the flag rests on.
    """
    checked_at = datetime.now(tz=TIMEZONE).strftime('%d/%m/%Y %H:%M')
    styles = getSampleStyleSheet()
    doc = SimpleDocTemplate(
        output,
        pagesize=A4,
        title=f"Cheat check for {result.handle}",
        leftMargin=0.75*inch,
        rightMargin=0.75*inch,
        topMargin=0.75*inch,
        bottomMargin=0.75*inch
    )

    elements = [
        Paragraph(f"Cheat check: {escape(result.handle)}", styles['Title']),
        Paragraph(escape(describe(result)[0]), styles['Heading3']),
    ]
    if result.status == CheckStatus.ERROR and result.error:
        elements.append(Paragraph(escape(result.error), styles['Code']))

    for contest_id in result.contest_ids:
        entries = result.evidence[contest_id]
        elements.append(Spacer(1, 0.2*inch))
        elements.append(Paragraph(escape(contest_title(result, contest_id)), styles['Heading4']))
        elements.append(Paragraph(evidence_summary(entries), styles['Italic']))
        if entries:
            table = Table(evidence_rows(entries), colWidths=[1.2*inch, 0.9*inch, 2*inch, 1.9*inch], hAlign='LEFT')
            table.setStyle(EVIDENCE_STYLE)
            elements.append(table)

    draw_footer = footer_drawer(result.handle, checked_at)
    doc.build(elements, onFirstPage=draw_footer, onLaterPages=draw_footer)

def pdf_bytes(result: CheckResult) -> bytes:
    buffer = io.BytesIO()
    generate_pdf_report(result, buffer)
    return buffer.getvalue()

def main():
    if len(sys.argv) not in (2, 3) or not sys.argv[1].strip():
        print("Usage: python export_pdf.py handle [output_file]")
        sys.exit(2)

    result = check(sys.argv[1])
    if result.status == CheckStatus.ERROR:
        print(f"Error: Could not check {result.handle}: {result.error}")
        sys.exit(2)

    output_filename = sys.argv[2] if len(sys.argv) == 3 else f"cheat_report_{result.handle}.pdf"
    generate_pdf_report(result, output_filename)
    print(f"PDF report generated successfully: {output_filename}")

if __name__ == "__main__":
    main()
