from io import BytesIO
from textwrap import wrap

from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from frontend.report_layout import build_week_rows, parameter_summary, plan_description


def generate_pdf(plan: dict, form_values: dict) -> bytes:
    buffer = BytesIO()
    c = canvas.Canvas(buffer, pagesize=A4)
    width, height = A4
    x, y = 50, height - 50

    def line(text, font="Helvetica", size=11, step=14, indent=0):
        nonlocal y
        c.setFont(font, size)
        for wrapped in wrap(str(text), 90 - indent // 5) or [""]:
            if y < 60:
                c.showPage()
                c.setFont(font, size)
                y = height - 50
            c.drawString(x + indent, y, wrapped)
            y -= step

    line("Running Plan", "Helvetica-Bold", 18, 30)

    for label, value in parameter_summary(form_values):
        line(f"{label}: {value}")
    y -= 10

    line(plan_description(plan))
    y -= 10

    for row in build_week_rows(plan):
        line(f"Week {row['week']} ({row['mileage']} miles)", "Helvetica-Bold", 13, 18)
        for day, workout in row["days"]:
            line(f"{day}: {workout}", indent=15)
        line(f"Notes: {row['notes']}", "Helvetica-Oblique", 10, 13, indent=15)
        y -= 10

    c.save()
    buffer.seek(0)
    return buffer.read()
