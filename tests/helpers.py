import json

import httpx

from app.services.generator_service import EmailGeneratorService

API_URL = "https://gemini.test/v1beta/models/test:generateContent?key="
API_KEY = "test-key"


def gemini_response(text):
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


class RecordingHandler:
    """MockTransport handler that keeps every request it sees"""

    def __init__(self, status_code=200, body=None, raw=None, exc=None):
        self.status_code = status_code
        self.body = body if body is not None else gemini_response("  Sounds good, see you then.  ")
        self.raw = raw
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.raw is not None:
            return httpx.Response(self.status_code, text=self.raw)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_json(self):
        return json.loads(self.requests[-1].content)


def make_generator(handler):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return EmailGeneratorService(client=client, api_url=API_URL, api_key=API_KEY)
