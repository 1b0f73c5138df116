import aiohttp
import pytest
from aioresponses import aioresponses

from genai_bridge.core.converters.content_converter import (
    ROLE_MODEL,
    ROLE_USER,
    convert_content,
    convert_part,
    convert_parts,
    convert_role,
)
from genai_bridge.core.types.conversation import (
    BinaryContent,
    ChatMessageType,
    ImageURLContent,
    MessageContent,
    TextContent,
)
from genai_bridge.core.types.exceptions import (
    ImageDownloadError,
    InvalidMimeTypeError,
    SystemRoleNotSupportedError,
    UnsupportedContentError,
    UnsupportedRoleError,
)

_IMAGE_URL = "https://example.com/image.png"
_IMAGE_BYTES = b"\x89PNG\r\n\x1a\nfake image"


#
# Fixtures
#
@pytest.fixture
def mock_aioresponse():
    with aioresponses() as m:
        yield m


#
# Tests
#
@pytest.mark.parametrize(
    "role,expected",
    [
        (ChatMessageType.HUMAN, ROLE_USER),
        (ChatMessageType.GENERIC, ROLE_USER),
        (ChatMessageType.AI, ROLE_MODEL),
    ],
)
def test_convert_role(role, expected):
    assert convert_role(role) == expected


def test_convert_role_system():
    with pytest.raises(SystemRoleNotSupportedError, match="system role"):
        convert_role(ChatMessageType.SYSTEM)


def test_convert_role_function():
    with pytest.raises(UnsupportedRoleError, match="role function not supported"):
        convert_role(ChatMessageType.FUNCTION)


@pytest.mark.asyncio
async def test_convert_text_part():
    part = await convert_part(TextContent(text="Hello"))

    assert part.text == "Hello"
    assert part.inline_data is None


@pytest.mark.asyncio
async def test_convert_binary_part_is_verbatim():
    part = await convert_part(BinaryContent(mime_type="image/webp", data=b"abc"))

    assert part.inline_data is not None
    assert part.inline_data.mime_type == "image/webp"
    assert part.inline_data.data == b"abc"


@pytest.mark.asyncio
async def test_convert_unknown_part():
    with pytest.raises(UnsupportedContentError):
        await convert_part(object())  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_convert_image_url_part(mock_aioresponse):
    mock_aioresponse.get(
        _IMAGE_URL, status=200, body=_IMAGE_BYTES, content_type="image/png"
    )

    parts = await convert_parts(
        [TextContent(text="Describe:"), ImageURLContent(url=_IMAGE_URL)]
    )

    assert len(parts) == 2
    assert parts[0].text == "Describe:"
    assert parts[1].inline_data.mime_type == "image/png"
    assert parts[1].inline_data.data == _IMAGE_BYTES


@pytest.mark.asyncio
async def test_convert_image_url_ignores_mime_parameters(mock_aioresponse):
    mock_aioresponse.get(
        _IMAGE_URL,
        status=200,
        body=_IMAGE_BYTES,
        content_type="image/jpeg; charset=binary",
    )

    parts = await convert_parts([ImageURLContent(url=_IMAGE_URL)])

    assert parts[0].inline_data.mime_type == "image/jpeg"


@pytest.mark.asyncio
@pytest.mark.parametrize("content_type", ["png", "image/png/extra", "", "image/"])
async def test_convert_image_url_invalid_mime_type(mock_aioresponse, content_type):
    mock_aioresponse.get(
        _IMAGE_URL, status=200, body=_IMAGE_BYTES, content_type=content_type
    )

    with pytest.raises(InvalidMimeTypeError):
        await convert_parts([ImageURLContent(url=_IMAGE_URL)])


@pytest.mark.asyncio
async def test_convert_image_url_http_error(mock_aioresponse):
    mock_aioresponse.get(_IMAGE_URL, status=404)

    with pytest.raises(ImageDownloadError, match="404"):
        await convert_parts([ImageURLContent(url=_IMAGE_URL)])


@pytest.mark.asyncio
async def test_convert_image_url_connection_error(mock_aioresponse):
    mock_aioresponse.get(
        _IMAGE_URL, exception=aiohttp.ClientConnectionError("connection refused")
    )

    with pytest.raises(ImageDownloadError) as exc_info:
        await convert_parts([ImageURLContent(url=_IMAGE_URL)])
    assert isinstance(exc_info.value.__cause__, aiohttp.ClientConnectionError)


@pytest.mark.asyncio
async def test_convert_content():
    message = MessageContent.from_text(ChatMessageType.AI, "Hi", "there")

    content = await convert_content(message)

    assert content.role == ROLE_MODEL
    assert [part.text for part in content.parts] == ["Hi", "there"]


@pytest.mark.asyncio
async def test_convert_content_checks_role_before_download(mock_aioresponse):
    message = MessageContent(
        role=ChatMessageType.SYSTEM, parts=[ImageURLContent(url=_IMAGE_URL)]
    )

    with pytest.raises(SystemRoleNotSupportedError):
        await convert_content(message)
    assert not mock_aioresponse.requests
