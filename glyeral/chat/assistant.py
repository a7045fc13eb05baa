"""
Chat Assistant - keyword dispatch over canned clinical answers.

Drug keywords win over general intents. Within a drug, the first matching
intent wins and "why" is the default. Unmatched messages get a fallback chosen
from the message text, so the same question always gets the same answer.
"""

import logging
import zlib
from typing import Iterable, Optional

from glyeral.chat.responses import (
    CONFIDENCE_RESPONSE,
    DRUG_RESPONSES,
    FALLBACK_RESPONSES,
    GUIDELINES_RESPONSE,
    INTERACTIONS_RESPONSE,
    NO_INTERACTIONS,
    NO_RECOMMENDATIONS,
    SUMMARY_FOOTER,
)
from glyeral.engine import formulary
from glyeral.models.chat import ChatReply, QuickChip
from glyeral.models.recommendation import DrugRecommendation


logger = logging.getLogger(__name__)


# =============================================================================
# INTENT KEYWORDS
# =============================================================================

# (intent, keywords, delay_ms) checked in order after a drug keyword matched
DRUG_INTENTS = [
    ("why", ["why", "reason", "recommend", "rationale"], 1200),
    ("interactions", ["interact", "combination", "combine"], 1400),
    ("side_effects", ["side effect", "adverse", "risk", "safety"], 1300),
]
DRUG_DEFAULT_DELAY_MS = 1100

# Checked in order when no drug keyword matched
GENERAL_INTENTS = [
    ("summary", ["summar", "overview", "all recommendation"], 1500),
    ("interactions", ["interact", "combination", "together"], 1600),
    ("confidence", ["confidence", "score", "percent"], 1200),
    ("guidelines", ["guideline", "ada", "kdigo", "aha", "evidence"], 1100),
]
FALLBACK_DELAY_MS = 900

DEFAULT_CHIPS = [
    QuickChip(label="Summarize all", message="Give me a summary of all recommendations"),
    QuickChip(
        label="Check interactions",
        message="Are there any drug interactions I should know about?",
    ),
    QuickChip(label="Explain scores", message="How are the confidence scores calculated?"),
]


def _matches(text: str, keywords: list[str]) -> bool:
    return any(keyword in text for keyword in keywords)


class ChatAssistant:
    """Answers physician questions about the current recommendations."""

    def respond(
        self,
        message: str,
        recommendations: Optional[Iterable[DrugRecommendation]] = None,
    ) -> ChatReply:
        """
        Answer a chat message.

        Args:
            message: The physician's question
            recommendations: Recommendations currently on screen

        Returns:
            ChatReply with the answer, the matched intent and a typing delay hint
        """
        recs = list(recommendations or [])
        text = (message or "").lower().strip()

        reply = self._drug_reply(text) or self._general_reply(text, recs)
        if reply is None:
            index = zlib.crc32(text.encode("utf-8")) % len(FALLBACK_RESPONSES)
            reply = ChatReply(
                response=FALLBACK_RESPONSES[index],
                intent="fallback",
                delay_ms=FALLBACK_DELAY_MS,
            )

        logger.debug(f"Chat intent {reply.intent} for {len(text)} chars")
        return reply

    def quick_chips(
        self,
        recommendations: Optional[Iterable[DrugRecommendation]] = None,
    ) -> list[QuickChip]:
        """Fixed chips plus "Why X?" for the two highest-confidence recommendations."""
        chips = list(DEFAULT_CHIPS)
        top = sorted(recommendations or [], key=lambda r: r.confidence, reverse=True)[:2]
        for rec in top:
            name = _label(rec)
            chips.append(QuickChip(
                label=f"Why {name}?",
                message=f"Why was {name} recommended for this patient?",
            ))
        return chips

    def _drug_reply(self, text: str) -> Optional[ChatReply]:
        for drug, answers in DRUG_RESPONSES.items():
            if drug not in text:
                continue
            for intent, keywords, delay_ms in DRUG_INTENTS:
                if _matches(text, keywords):
                    return ChatReply(
                        response=answers[intent],
                        intent=f"{drug}:{intent}",
                        delay_ms=delay_ms,
                    )
            return ChatReply(
                response=answers["why"],
                intent=f"{drug}:why",
                delay_ms=DRUG_DEFAULT_DELAY_MS,
            )
        return None

    def _general_reply(
        self,
        text: str,
        recs: list[DrugRecommendation],
    ) -> Optional[ChatReply]:
        for intent, keywords, delay_ms in GENERAL_INTENTS:
            if not _matches(text, keywords):
                continue
            if intent == "summary":
                response = _summary(recs)
            elif intent == "interactions":
                response = INTERACTIONS_RESPONSE.format(count=len(recs)) if recs else NO_INTERACTIONS
            elif intent == "confidence":
                response = CONFIDENCE_RESPONSE
            else:
                response = GUIDELINES_RESPONSE
            return ChatReply(response=response, intent=intent, delay_ms=delay_ms)
        return None


def _label(rec: DrugRecommendation) -> str:
    return rec.display_name or formulary.display_name(rec.drug_id)


def _summary(recs: list[DrugRecommendation]) -> str:
    if not recs:
        return NO_RECOMMENDATIONS
    lines = "\n".join(
        f"- **{_label(rec)}** ({rec.dose_text}), {rec.confidence}% confidence"
        for rec in recs
    )
    return f"Here's a summary of the current recommendations:\n\n{lines}\n\n{SUMMARY_FOOTER}"
