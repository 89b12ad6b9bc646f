"""
Outbound Call Agent entry point.

Usage:
    python -m call_agent

Environment Variables:
    OPENAI_API_KEY - OpenAI API key
    TWILIO_ACCOUNT_SID, TWILIO_AUTH_TOKEN - Twilio credentials
    TWILIO_CALLER_ID - Number outbound calls are placed from
    HOST, PORT - Bind address (default: 0.0.0.0:8000)
"""
import uvicorn

from call_agent.core.config import settings


def main() -> None:
    uvicorn.run("call_agent.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
