from enum import Enum
from typing import List, Optional, Tuple, Union


class ToneCategory(str, Enum):
    URGENT = "urgent"
    GRATEFUL = "grateful"
    APOLOGETIC = "apologetic"
    SCHEDULING = "scheduling"
    PROFESSIONAL = "professional"


# Checked top to bottom, first group with a hit wins
TONE_KEYWORDS: List[Tuple[Tuple[str, ...], ToneCategory]] = [
    (("urgent", "asap", "immediately"), ToneCategory.URGENT),
    (("thank", "appreciate", "grateful"), ToneCategory.GRATEFUL),
    (("sorry", "apologize", "mistake"), ToneCategory.APOLOGETIC),
    (("meeting", "schedule", "appointment"), ToneCategory.SCHEDULING),
]

TONE_GUIDANCE = {
    ToneCategory.URGENT.value: "Respond with urgency and provide clear next steps.",
    ToneCategory.GRATEFUL.value: "Acknowledge their thanks and maintain positive tone.",
    ToneCategory.APOLOGETIC.value: "Accept gracefully and focus on solutions.",
    ToneCategory.SCHEDULING.value: "Be specific about availability and confirm details.",
}
DEFAULT_GUIDANCE = "Maintain professional courtesy."


class ContextService:
    """
    Keyword based tone detection and the matching prompt guidance.

    Pure functions of their input, safe to call from any thread.
    """

    def detect_tone(self, email_content: Optional[str]) -> ToneCategory:
        """
        Classify the email into a tone category

        Only the highest priority category is returned when keywords
        from several groups are present.
        """
        content = (email_content or "").lower()

        for keywords, tone in TONE_KEYWORDS:
            if any(keyword in content for keyword in keywords):
                return tone

        return ToneCategory.PROFESSIONAL

    def get_contextual_prompt(
            self,
            email_content: Optional[str],
            requested_tone: Optional[Union[str, ToneCategory]] = None
    ) -> str:
        """
        Guidance sentence for the prompt.

        A non-empty requested tone is used as-is, unknown tones get the
        professional guidance.
        """
        if isinstance(requested_tone, ToneCategory):
            final_tone = requested_tone.value
        elif requested_tone:
            final_tone = requested_tone
        else:
            final_tone = self.detect_tone(email_content).value

        return TONE_GUIDANCE.get(final_tone, DEFAULT_GUIDANCE)


context_service = ContextService()
