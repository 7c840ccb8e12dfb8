import sys

if sys.platform == "darwin":
    FONT_STACK = 'Helvetica Neue","Arial'
elif sys.platform.startswith("win"):
    FONT_STACK = 'Segoe UI","Arial'
else:
    FONT_STACK = 'DejaVu Sans","Arial'

ACCENT = "#0ea5e9"   # chart line colour

APP_QSS = f"""
QWidget {{
    background: #0b0f14;
    color: #e7eef7;
    font-family: "{FONT_STACK}";
    font-size: 14px;
}}

QLabel#muted {{ color: rgba(231,238,247,0.70); }}
QLabel#spike {{ color: #ef4444; font-weight: 750; }}

QPushButton {{
    background: #1f2937;
    border: 1px solid rgba(255,255,255,0.10);
    padding: 10px 14px;
    border-radius: 12px;
    font-weight: 600;
}}
QPushButton:hover {{ background: #263244; }}

QSpinBox, QDoubleSpinBox {{
    background: rgba(255,255,255,0.06);
    border: 1px solid rgba(255,255,255,0.12);
    border-radius: 8px;
    padding: 4px 8px;
    min-width: 120px;
}}
"""
