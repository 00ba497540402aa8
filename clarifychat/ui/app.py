"""
ClarifyChat - Streamlit application

Chat page that asks follow-up questions before answering ambiguous requests.

Run with:
    streamlit run clarifychat/ui/app.py
"""

import logging

import streamlit as st
from dotenv import load_dotenv

from clarifychat.ui.render import answer_widget_key, answered_html, question_label_html
from clarifychat.ui.session import ConversationSession

load_dotenv()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

st.set_page_config(page_title="ClarifyChat", layout="centered")

st.markdown(
    """
<style>
    .category-badge {
        display: inline-block;
        margin-left: 8px;
        padding: 2px 8px;
        font-size: 11px;
        background: #FEF08A;
        color: #713F12;
        border-radius: 9999px;
    }

    .answered-box {
        background: #F0FDF4;
        border-left: 3px solid #16A34A;
        padding: 12px;
        border-radius: 4px;
        margin-bottom: 12px;
    }

    .answered-question {
        color: #15803D;
        font-weight: 600;
        margin: 0;
    }

    .answered-answer {
        color: #16A34A;
        margin: 0 0 8px 16px;
    }
</style>
""",
    unsafe_allow_html=True,
)


def get_session() -> ConversationSession:
    if "chat_session" not in st.session_state:
        st.session_state.chat_session = ConversationSession()
    return st.session_state.chat_session


def render_history(session):
    for msg in session.conversation:
        label = "You" if msg.role == "user" else "AI"
        with st.chat_message(msg.role):
            st.caption(label)
            st.markdown(msg.content)


def render_error(session):
    st.error(session.error)
    if st.button("Dismiss", key="dismiss_error"):
        session.dismiss_error()
        st.rerun()


def render_answered(session):
    if not session.answered_questions:
        return
    st.markdown("**Your answers:**")
    st.markdown(answered_html(session.answered_questions), unsafe_allow_html=True)


def render_clarification_form(session):
    with st.form("clarification_form"):
        answers = {}
        for q in session.pending_questions:
            st.markdown(question_label_html(q), unsafe_allow_html=True)
            answers[q.id] = st.text_input(
                q.question,
                value=q.answer,
                key=answer_widget_key(session.clarification_round, q.id),
                placeholder="Type your answer here...",
                label_visibility="collapsed",
            )
        submitted = st.form_submit_button("Send answers", use_container_width=True)

    if submitted:
        for question_id, answer in answers.items():
            session.update_answer(question_id, answer)
        with st.spinner("Sending..."):
            session.submit_clarifications()
        st.rerun()


def render_text_input(session):
    if prompt := st.chat_input("Type a message..."):
        with st.chat_message("user"):
            st.markdown(prompt)
        with st.spinner("Sending..."):
            session.submit_message(prompt)
        st.rerun()


st.title("ClarifyChat")

session = get_session()
render_history(session)

if session.error:
    render_error(session)

render_answered(session)

if session.shows_clarification_form:
    render_clarification_form(session)
elif session.shows_text_input:
    render_text_input(session)
