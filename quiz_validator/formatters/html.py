"""
HTML report formatter.

Produces a single self-contained page: summary block, one block per
question and a Chart.js bar chart of the scores. Question text and
messages are HTML-escaped.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from html import escape

from quiz_validator.core.models import QuizQuestion, QuizSetResult

CHART_JS_URL = "https://cdn.jsdelivr.net/npm/chart.js"
PASS_COLOR = "rgba(75, 192, 192, 0.6)"
FAIL_COLOR = "rgba(255, 99, 132, 0.6)"

_HEAD = f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Quiz Validation Report</title>
  <script src="{CHART_JS_URL}"></script>
  <style>
    body {{ font-family: Arial, sans-serif; margin: 20px; }}
    .summary {{ background: #f5f5f5; padding: 20px; border-radius: 8px; margin-bottom: 20px; }}
    .pass {{ color: green; }}
    .fail {{ color: red; }}
    .question {{ border: 1px solid #ddd; padding: 15px; margin: 10px 0; border-radius: 5px; }}
    canvas {{ max-width: 600px; margin: 20px 0; }}
  </style>
</head>
<body>
  <h1>Quiz Validation Report</h1>
"""


def format_html(result: QuizSetResult, questions: Sequence[QuizQuestion]) -> str:
    """Render the validation result as an HTML page."""
    summary = result.summary

    html = _HEAD
    html += f"""
  <div class="summary">
    <h2>Summary</h2>
    <p><strong>Total Questions:</strong> {summary.total}</p>
    <p class="pass"><strong>Passed:</strong> {summary.passed}</p>
    <p class="fail"><strong>Failed:</strong> {summary.failed}</p>
    <p><strong>Average Score:</strong> {summary.average_score:.1f}/100</p>
  </div>

  <canvas id="scoreChart"></canvas>

  <h2>Detailed Results</h2>"""

    for i, (r, question) in enumerate(zip(result.results, questions), start=1):
        status = '<span class="pass">✓ PASS</span>' if r.valid else '<span class="fail">✗ FAIL</span>'
        html += f"""
    <div class="question">
      <h3>Question {i} {status}</h3>
      <p><strong>Score:</strong> {r.score}/100</p>
      <p><strong>Question:</strong> {escape(question.question or "")}</p>"""

        if r.errors:
            html += "<p><strong>Errors:</strong></p><ul>"
            for e in r.errors:
                html += f"<li>{escape(e.field)}: {escape(e.message)}</li>"
            html += "</ul>"

        html += "</div>"

    labels = [f"Q{i}" for i in range(1, len(result.results) + 1)]
    scores = [r.score for r in result.results]
    colors = [PASS_COLOR if r.valid else FAIL_COLOR for r in result.results]

    html += f"""
  <script>
    const ctx = document.getElementById('scoreChart').getContext('2d');
    new Chart(ctx, {{
      type: 'bar',
      data: {{
        labels: {json.dumps(labels)},
        datasets: [{{
          label: 'Score',
          data: {json.dumps(scores)},
          backgroundColor: {json.dumps(colors)},
        }}]
      }},
      options: {{
        scales: {{ y: {{ beginAtZero: true, max: 100 }} }}
      }}
    }});
  </script>
</body>
</html>"""

    return html
