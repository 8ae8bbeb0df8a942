from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.schemas.email import EmailRequest
from app.services.generator_service import EmailGeneratorService, get_email_generator

router = APIRouter()

SAMPLE_EMAIL = (
    "Hi, I wanted to follow up on our meeting yesterday. "
    "Could you please send me the documents we discussed?"
)

@router.post("/generate", response_class=PlainTextResponse)
def generate_email(
    email_request: EmailRequest,
    generator: EmailGeneratorService = Depends(get_email_generator)
):
    """
    Generate a reply to the given email

    - **emailContent**: text of the email being answered
    - **tone**: optional tone (urgent, grateful, apologetic, scheduling, professional), detected when omitted

    Always answers 200; generation failures come back as fallback text.
    """
    return generator.generate_reply(email_request)

@router.get("/health", response_class=PlainTextResponse)
def health():
    return "Email Writer API is running!"

@router.post("/test", response_class=PlainTextResponse)
def test_generation(generator: EmailGeneratorService = Depends(get_email_generator)):
    """Run the generator against a fixed sample email"""
    test_request = EmailRequest(email_content=SAMPLE_EMAIL, tone="professional")
    return generator.generate_reply(test_request)
