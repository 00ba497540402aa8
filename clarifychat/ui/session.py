"""
Conversation state for the chat UI.

The UI is always in exactly one view state:

    Idle                   -> free-text input
    AwaitingAnswer         -> request in flight, inputs disabled
    AwaitingClarification  -> clarification form
    ErrorView              -> dismissable banner, resumes the previous view

Transitions are driven by handler replies; the Streamlit page only renders
the current state and forwards user actions to ConversationSession.
"""

from __future__ import annotations

import json
import logging
from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, Field

from clarifychat.schemas import ChatReply, ClarificationQuestion, ClarificationResponse, Message

from .client import ChatClient, ChatClientError

logger = logging.getLogger(__name__)

MISSING_ANSWERS = "Please answer all of the questions."


class Idle(BaseModel):
    kind: Literal["idle"] = "idle"


class AwaitingClarification(BaseModel):
    kind: Literal["awaiting_clarification"] = "awaiting_clarification"
    questions: List[ClarificationQuestion]
    round_number: int = 1


ResumableView = Annotated[Union[Idle, AwaitingClarification], Field(discriminator="kind")]


class AwaitingAnswer(BaseModel):
    kind: Literal["awaiting_answer"] = "awaiting_answer"
    resume: ResumableView


class ErrorView(BaseModel):
    kind: Literal["error"] = "error"
    message: str
    resume: ResumableView


ViewState = Annotated[
    Union[Idle, AwaitingAnswer, AwaitingClarification, ErrorView],
    Field(discriminator="kind"),
]


def encode_clarifications(questions: List[ClarificationQuestion]) -> str:
    """Serialise answered questions into the content of one synthetic user message."""
    return json.dumps(
        {"clarifications": [q.model_dump() for q in questions]},
        ensure_ascii=False,
    )


class ConversationSession:
    def __init__(self, client: ChatClient | None = None) -> None:
        self.client = client or ChatClient()
        self.conversation: List[Message] = []
        self.answered_questions: List[ClarificationQuestion] = []
        self.rounds_started = 0
        self.view: ViewState = Idle()

    # ------------------------------------------------------------------ views
    @property
    def loading(self) -> bool:
        return isinstance(self.view, AwaitingAnswer)

    @property
    def shows_text_input(self) -> bool:
        return isinstance(self.view, Idle)

    @property
    def shows_clarification_form(self) -> bool:
        return isinstance(self.view, AwaitingClarification)

    @property
    def error(self) -> str | None:
        return self.view.message if isinstance(self.view, ErrorView) else None

    @property
    def clarification_round(self) -> int:
        return self.view.round_number if isinstance(self.view, AwaitingClarification) else 0

    @property
    def pending_questions(self) -> List[ClarificationQuestion]:
        return self.view.questions if isinstance(self.view, AwaitingClarification) else []

    # ---------------------------------------------------------------- actions
    def submit_message(self, text: str) -> None:
        text = (text or "").strip()
        if not text or not isinstance(self.view, Idle):
            return

        new_message = Message(role="user", content=text)
        reply = self._send(self.conversation + [new_message], resume=self.view)
        if reply is None:
            return

        self.conversation.append(new_message)
        self._apply_reply(reply)

    def update_answer(self, question_id: int, answer: str) -> None:
        for question in self.pending_questions:
            if question.id == question_id:
                question.answer = answer

    def submit_clarifications(self) -> None:
        if not isinstance(self.view, AwaitingClarification):
            return

        pending = self.view
        if not all(q.answer.strip() for q in pending.questions):
            self.view = ErrorView(message=MISSING_ANSWERS, resume=pending)
            return

        synthetic = Message(role="user", content=encode_clarifications(pending.questions))
        reply = self._send(self.conversation + [synthetic], resume=pending)
        if reply is None:
            return

        self.answered_questions = [q.model_copy() for q in pending.questions]
        self._apply_reply(reply)

    def dismiss_error(self) -> None:
        if isinstance(self.view, ErrorView):
            self.view = self.view.resume

    # --------------------------------------------------------------- helpers
    def _send(self, messages: List[Message], resume: Idle | AwaitingClarification) -> ChatReply | None:
        self.view = AwaitingAnswer(resume=resume)
        try:
            return self.client.send(messages)
        except ChatClientError as exc:
            self.view = ErrorView(message=str(exc), resume=resume)
            return None

    def _apply_reply(self, reply: ChatReply) -> None:
        if isinstance(reply, ClarificationResponse):
            if reply.questions:
                self.rounds_started += 1
                # Ids are positional within this round, whatever the handler sent.
                self.view = AwaitingClarification(
                    questions=[
                        ClarificationQuestion(id=index, question=item.question, category=item.category)
                        for index, item in enumerate(reply.questions)
                    ],
                    round_number=self.rounds_started,
                )
                logger.info(f"[UI] Clarification round with {len(reply.questions)} question(s)")
                return
            self.view = Idle()
            return

        self.conversation.append(Message(role="assistant", content=reply.content))
        self.view = Idle()
