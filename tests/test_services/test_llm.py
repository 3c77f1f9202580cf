import pytest
from unittest.mock import patch

from app.services.llm import AIServiceNotConfigured, LLMService
from app.services.prompts import CHAT_SYSTEM_INSTRUCTION


class TestLLMService:
    def test_init_without_api_key(self):
        """Test initialization without API key"""
        with patch("app.config.settings.anthropic_api_key", ""):
            service = LLMService()
            assert service.client is None

    def test_init_with_api_key(self):
        with patch("app.config.settings.anthropic_api_key", "test-key"):
            with patch("app.services.llm.Anthropic") as mock_anthropic:
                service = LLMService()

        mock_anthropic.assert_called_once_with(api_key="test-key")
        assert service.client is mock_anthropic.return_value

    def test_answer_question_without_client(self):
        service = LLMService()
        service.client = None

        with pytest.raises(AIServiceNotConfigured):
            service.answer_question("Who is the petitioner?", "Some document")

    def test_answer_question(self, llm_service, mock_claude_client, sample_document_text):
        """Test question is sent with system instruction and document context"""
        answer = llm_service.answer_question("Who is the petitioner?", sample_document_text)

        assert answer == "The petitioner is **ABC Pvt. Ltd.**"

        kwargs = mock_claude_client.messages.create.call_args.kwargs
        assert kwargs["system"] == CHAT_SYSTEM_INSTRUCTION
        assert kwargs["temperature"] == 0.3
        assert kwargs["top_k"] == 40
        assert kwargs["max_tokens"] == 2048
        assert "top_p" not in kwargs

        messages = kwargs["messages"]
        assert len(messages) == 1
        assert messages[0]["role"] == "user"
        assert "=== DOCUMENT CONTEXT ===" in messages[0]["content"]
        assert sample_document_text in messages[0]["content"]
        assert messages[0]["content"].rstrip().endswith("Who is the petitioner?")

    def test_answer_question_with_history(
        self, llm_service, mock_claude_client, sample_history
    ):
        llm_service.answer_question("And the respondent?", "Doc", sample_history)

        messages = mock_claude_client.messages.create.call_args.kwargs["messages"]
        assert [m["role"] for m in messages] == ["user", "assistant", "user"]
        assert messages[0]["content"] == "Who is the petitioner?"
        assert messages[1]["content"] == "The petitioner is ABC Pvt. Ltd."
        assert "And the respondent?" in messages[2]["content"]

    def test_answer_question_passes_top_p_when_configured(self, llm_service, mock_claude_client):
        with patch("app.config.settings.chat_top_p", 0.8):
            llm_service.answer_question("Question?", "Doc")

        assert mock_claude_client.messages.create.call_args.kwargs["top_p"] == 0.8

    def test_to_claude_messages_normalizes_turns(self):
        """Test leading model turns are dropped and repeated roles merged"""
        history = [
            {"role": "model", "content": "Welcome"},
            {"role": "user", "content": "First"},
            {"role": "user", "content": "Second"},
            {"role": "model", "content": ""},
            {"role": "model", "content": "Answer"},
        ]

        messages = LLMService.to_claude_messages(history)

        assert messages == [
            {"role": "user", "content": "First\n\nSecond"},
            {"role": "assistant", "content": "Answer"},
        ]

    def test_answer_question_after_trailing_user_turn(self, llm_service, mock_claude_client):
        """Test a dangling user turn is merged with the new question"""
        history = [{"role": "user", "content": "Unanswered question"}]

        llm_service.answer_question("New question", "Doc", history)

        messages = mock_claude_client.messages.create.call_args.kwargs["messages"]
        assert len(messages) == 1
        assert messages[0]["content"].startswith("Unanswered question")
        assert "New question" in messages[0]["content"]

    def test_summarize(self, llm_service, mock_claude_client, claude_reply):
        mock_claude_client.messages.create.return_value = claude_reply("1. Parties: ...")

        result = llm_service.summarize("Case text", "short")

        assert result == "1. Parties: ..."
        prompt = mock_claude_client.messages.create.call_args.kwargs["messages"][0]["content"]
        assert "STRICT 5-line summary" in prompt
        assert "Case text" in prompt

    def test_summarize_unknown_type(self, llm_service, mock_claude_client):
        with pytest.raises(ValueError):
            llm_service.summarize("Case text", "haiku")

        mock_claude_client.messages.create.assert_not_called()

    def test_empty_response(self, llm_service, mock_claude_client):
        mock_claude_client.messages.create.return_value.content = []

        assert llm_service.summarize("Case text", "chronology") == ""

    def test_extract_text_from_image(self, llm_service, mock_claude_client):
        llm_service.extract_text_from_image(b"\xff\xd8", "image/jpeg")

        block = mock_claude_client.messages.create.call_args.kwargs["messages"][0]["content"][0]
        assert block["source"]["type"] == "base64"
        assert block["source"]["media_type"] == "image/jpeg"
        assert block["source"]["data"] == "/9g="
