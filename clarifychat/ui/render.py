"""
HTML fragments for the Streamlit page.

Everything interpolated here comes from the model or the user, so it is
escaped before it reaches ``st.markdown(..., unsafe_allow_html=True)``.
"""

from __future__ import annotations

from html import escape
from typing import List

from clarifychat.schemas import ClarificationQuestion


def question_label_html(question: ClarificationQuestion) -> str:
    badge = f'<span class="category-badge">{escape(question.category)}</span>' if question.category else ""
    return f"{escape(question.question)}{badge}"


def answered_html(questions: List[ClarificationQuestion]) -> str:
    rows = "".join(
        f'<p class="answered-question">{escape(q.question)}</p><p class="answered-answer">{escape(q.answer)}</p>'
        for q in questions
    )
    return f'<div class="answered-box">{rows}</div>'


def answer_widget_key(round_number: int, question_id: int) -> str:
    # Position ids repeat between rounds; the round keeps widget state from leaking across.
    return f"clarify_{round_number}_{question_id}"
