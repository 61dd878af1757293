"""Tests for the ElevenLabs speech actions."""

import base64
from unittest.mock import AsyncMock, patch

import aiohttp
import pytest

from flashlib.core.errors import ConfigurationError, ProviderError
from flashlib.providers.core.http import provider_error
from flashlib.providers.elevenlabs import ElevenLabsConfig, get_elevenlabs_actions
from flashlib.providers.elevenlabs.actions import audio_mime_type, speech_to_text, text_to_speech

REQUEST = "flashlib.providers.elevenlabs.actions.request_json"
REQUEST_BYTES = "flashlib.providers.elevenlabs.actions.request_bytes"
AUDIO = b"ID3fake-mp3-bytes"


@pytest.fixture
def config():
    return ElevenLabsConfig(api_key="xi-key")


class TestElevenLabsActionSet:
    """Test the factory."""

    def test_action_names(self):
        assert [action.name for action in get_elevenlabs_actions()] == ["text_to_speech", "speech_to_text"]

    def test_mime_types(self):
        assert audio_mime_type("mp3_44100_128") == "audio/mpeg"
        assert audio_mime_type("pcm_16000") == "audio/wav"


class TestTextToSpeech:
    """Test text_to_speech."""

    @pytest.mark.asyncio
    async def test_data_url(self, config):
        with patch(REQUEST_BYTES, new=AsyncMock(return_value=AUDIO)) as send:
            result = await text_to_speech(config, {"text": "Hello", "voice_id": "voice-1"})

        encoded = base64.b64encode(AUDIO).decode("ascii")
        assert result.startswith(
            f"Successfully converted text to speech. Audio data URL:\ndata:audio/mpeg;base64,{encoded}"
        )
        assert "Voice ID: voice-1\nModel: eleven_multilingual_v2\nFormat: mp3_44100_128" in result
        assert send.await_args.args[1] == "https://api.elevenlabs.io/v1/text-to-speech/voice-1"
        assert send.await_args.kwargs["params"] == {"output_format": "mp3_44100_128"}
        assert send.await_args.kwargs["headers"]["xi-api-key"] == "xi-key"

    @pytest.mark.asyncio
    async def test_raw_base64(self, config):
        with patch(REQUEST_BYTES, new=AsyncMock(return_value=AUDIO)):
            result = await text_to_speech(
                config, {"text": "Hello", "voice_id": "v", "return_url": False, "output_format": "pcm_16000"}
            )
        assert result.startswith("Successfully converted text to speech. Audio data in base64 format:")
        assert result.endswith(base64.b64encode(AUDIO).decode("ascii"))

    @pytest.mark.asyncio
    async def test_voice_settings_drop_unset(self, config):
        with patch(REQUEST_BYTES, new=AsyncMock(return_value=AUDIO)) as send:
            await text_to_speech(
                config,
                {"text": "Hi", "voice_id": "v", "voice_settings": {"stability": 0.5, "style": None}},
            )
        assert send.await_args.kwargs["json"]["voice_settings"] == {"stability": 0.5}

    @pytest.mark.asyncio
    async def test_missing_key(self):
        send = AsyncMock()
        with patch(REQUEST_BYTES, new=send):
            with pytest.raises(ConfigurationError, match="ElevenLabs API key not found"):
                await text_to_speech(ElevenLabsConfig(), {"text": "Hi", "voice_id": "v"})
        send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_error_prefix(self, config):
        error = provider_error("API Error (422): voice not found", "elevenlabs", "text_to_speech", status=422)
        with patch(REQUEST_BYTES, new=AsyncMock(side_effect=error)):
            with pytest.raises(ProviderError, match="^Failed to convert text to speech: API Error \\(422\\)"):
                await text_to_speech(config, {"text": "Hi", "voice_id": "v"})


class TestSpeechToText:
    """Test speech_to_text."""

    @pytest.mark.asyncio
    async def test_transcription(self, config):
        with patch(REQUEST, new=AsyncMock(return_value={"text": "hello world"})) as send:
            result = await speech_to_text(config, {"audio_url": "https://audio/x.mp3"})

        assert result == "Transcription:\nhello world\n"
        assert isinstance(send.await_args.kwargs["data"], aiohttp.FormData)

    @pytest.mark.asyncio
    async def test_timestamps_and_confidence(self, config):
        payload = {
            "text": "hi there",
            "words": [
                {"text": "hi", "start": 0.0, "end": 0.4, "type": "word", "confidence": 0.98},
                {"text": " ", "type": "spacing"},
                {"text": "there", "start": 0.5, "end": 1.0, "type": "word"},
            ],
        }
        with patch(REQUEST, new=AsyncMock(return_value=payload)):
            result = await speech_to_text(
                config,
                {"audio_url": "https://audio/x.mp3", "include_timestamps": True, "include_confidence": True},
            )
        assert "Word timestamps:\nhi (0.00s - 0.40s) [Confidence: 98.0%]\nthere (0.50s - 1.00s)\n" in result

    @pytest.mark.asyncio
    async def test_plain_string_response(self, config):
        with patch(REQUEST, new=AsyncMock(return_value="just text")):
            assert await speech_to_text(config, {"audio_url": "https://a"}) == "Transcription:\njust text"
