"""Unit tests for message models and request validation."""

import pytest
import pytest_check as check
from pydantic import ValidationError

from src.models.messages import ImageBlock, Message, TextBlock, as_blocks, is_inline_image
from src.models.schemas import ChatRequest

from tests.fixtures import PNG_DATA_URL


class TestContentShapes:
    """Tests for the plain text / block list variant."""

    def test_as_blocks_wraps_plain_text(self) -> None:
        assert as_blocks("Hi") == [TextBlock(text="Hi")]

    def test_as_blocks_copies_block_list(self) -> None:
        blocks = [TextBlock(text="a")]

        converted = as_blocks(blocks)
        converted.append(TextBlock(text="b"))

        assert blocks == [TextBlock(text="a")]

    def test_message_parses_typed_blocks(self) -> None:
        message = Message.model_validate(
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": "Hi"},
                    {"type": "image_url", "image_url": {"url": PNG_DATA_URL}},
                ],
            }
        )

        assert message.content == [TextBlock(text="Hi"), ImageBlock(uri=PNG_DATA_URL)]

    def test_unknown_role_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Message(role="tool", content="x")

    def test_is_inline_image(self) -> None:
        check.is_true(is_inline_image(PNG_DATA_URL))
        check.is_false(is_inline_image("javascript:alert(1)"))
        check.is_false(is_inline_image(None))


class TestOpenAISerialization:
    """Tests for the chat-completions wire shape."""

    def test_plain_text_message(self) -> None:
        message = Message(role="assistant", content="Hello")

        assert message.to_openai() == {"role": "assistant", "content": "Hello"}

    def test_block_message(self) -> None:
        message = Message(
            role="user",
            content=[TextBlock(text="Hi"), ImageBlock(uri=PNG_DATA_URL)],
        )

        assert message.to_openai() == {
            "role": "user",
            "content": [
                {"type": "text", "text": "Hi"},
                {"type": "image_url", "image_url": {"url": PNG_DATA_URL}},
            ],
        }


class TestChatRequest:
    """Tests for request payload validation."""

    def test_accepts_camel_case_fields(self) -> None:
        request = ChatRequest.model_validate(
            {
                "apiKey": "sk-x",
                "messages": [{"role": "user", "content": "Hi"}],
                "pdfBase64": "data:application/pdf;base64,AAAA",
                "pdfImages": [PNG_DATA_URL],
            }
        )

        check.equal(request.api_key, "sk-x")
        check.equal(request.pdf_base64, "data:application/pdf;base64,AAAA")
        check.equal(request.pdf_images, [PNG_DATA_URL])

    def test_accepts_snake_case_fields(self) -> None:
        request = ChatRequest.model_validate({"api_key": "sk-y", "pdf_images": []})

        check.equal(request.api_key, "sk-y")
        check.equal(request.messages, [])

    def test_invalid_image_blocks_in_history_are_dropped(self) -> None:
        request = ChatRequest.model_validate(
            {
                "messages": [
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": "see"},
                            {"type": "image_url", "image_url": {"url": "javascript:alert(1)"}},
                            {"type": "image_url", "image_url": {"url": PNG_DATA_URL}},
                        ],
                    }
                ]
            }
        )

        assert request.messages[0].content == [
            TextBlock(text="see"),
            ImageBlock(uri=PNG_DATA_URL),
        ]

    def test_non_string_images_are_accepted_for_filtering(self) -> None:
        request = ChatRequest.model_validate({"pdfImages": [1, None, PNG_DATA_URL]})

        assert request.pdf_images == [1, None, PNG_DATA_URL]
