"""ElevenLabs speech actions."""

import base64
import logging
from typing import Any, Dict, List, Optional

import aiohttp

from flashlib.actions.base import Action, bind_config
from flashlib.core.errors import ProviderError
from flashlib.providers.core.http import parse_record, query_params, request_bytes, request_json

from .config import ElevenLabsConfig
from .models import SpeechToTextParams, TextToSpeechParams, Transcription
from .prompts import SPEECH_TO_TEXT_PROMPT, TEXT_TO_SPEECH_PROMPT

logger = logging.getLogger(__name__)

PROVIDER = "elevenlabs"


def audio_mime_type(output_format: str) -> str:
    return "audio/mpeg" if output_format.startswith("mp3") else "audio/wav"


async def text_to_speech(config: ElevenLabsConfig, args: Dict[str, Any]) -> str:
    """Synthesize speech and return it base64 encoded."""
    voice_id = args.get("voice_id")
    model_id = args.get("model_id") or "eleven_multilingual_v2"
    output_format = args.get("output_format") or "mp3_44100_128"
    return_url = args.get("return_url")
    if return_url is None:
        return_url = True

    body: Dict[str, Any] = {"text": args.get("text"), "model_id": model_id}
    voice_settings = args.get("voice_settings")
    if voice_settings:
        body["voice_settings"] = {key: value for key, value in voice_settings.items() if value is not None}

    try:
        audio = await request_bytes(
            "POST",
            f"{config.base_url}/v1/text-to-speech/{voice_id}",
            provider=PROVIDER,
            operation="text_to_speech",
            headers={**config.headers(), "Content-Type": "application/json", "Accept": "audio/*"},
            params=query_params(output_format=output_format),
            json=body,
        )
    except ProviderError as e:
        raise e.with_prefix("Failed to convert text to speech")

    encoded = base64.b64encode(audio).decode("ascii")
    logger.debug(f"Synthesized {len(audio)} bytes of audio with voice {voice_id}")
    details = f"Voice ID: {voice_id}\nModel: {model_id}\nFormat: {output_format}"
    if return_url:
        data_url = f"data:{audio_mime_type(output_format)};base64,{encoded}"
        return f"Successfully converted text to speech. Audio data URL:\n{data_url}\n\n{details}"
    return f"Successfully converted text to speech. Audio data in base64 format:\n\n{details}\n\n{encoded}"


def format_transcription(transcription: Transcription, include_timestamps: bool, include_confidence: bool) -> str:
    result = f"Transcription:\n{transcription.text}\n\n"
    if include_timestamps and transcription.words:
        result += "Word timestamps:\n"
        for word in transcription.words:
            if word.type and word.type != "word":
                continue
            result += f"{word.text} ({word.start or 0:.2f}s - {word.end or 0:.2f}s)"
            if include_confidence and word.confidence:
                result += f" [Confidence: {word.confidence * 100:.1f}%]"
            result += "\n"
    return result.rstrip() + "\n"


async def speech_to_text(config: ElevenLabsConfig, args: Dict[str, Any]) -> str:
    """Transcribe an audio file referenced by URL."""
    form = aiohttp.FormData()
    form.add_field("model_id", args.get("model_id") or "scribe_v1")
    form.add_field("cloud_storage_url", args.get("audio_url") or "")
    if args.get("include_timestamps"):
        form.add_field("timestamps_granularity", "word")

    try:
        data = await request_json(
            "POST",
            f"{config.base_url}/v1/speech-to-text",
            provider=PROVIDER,
            operation="speech_to_text",
            headers=config.headers(),
            data=form,
        )
    except ProviderError as e:
        raise e.with_prefix("Failed to convert speech to text")

    if isinstance(data, str):
        return f"Transcription:\n{data}"
    return format_transcription(
        parse_record(Transcription, data, provider=PROVIDER, operation="speech_to_text"),
        bool(args.get("include_timestamps")),
        bool(args.get("include_confidence")),
    )


def get_elevenlabs_actions(config: Optional[ElevenLabsConfig] = None) -> List[Action]:
    """Build the ElevenLabs action set."""
    resolve = ElevenLabsConfig.resolver(config)
    return [
        Action("text_to_speech", TEXT_TO_SPEECH_PROMPT, TextToSpeechParams, bind_config(text_to_speech, resolve)),
        Action("speech_to_text", SPEECH_TO_TEXT_PROMPT, SpeechToTextParams, bind_config(speech_to_text, resolve)),
    ]
