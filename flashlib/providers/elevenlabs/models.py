"""Input schemas and response records for ElevenLabs actions."""

from typing import List, Literal, Optional

from pydantic import Field

from flashlib.core.models import ActionParameters, ProviderRecord

ModelId = Literal[
    "eleven_monolingual_v1",
    "eleven_multilingual_v1",
    "eleven_multilingual_v2",
    "eleven_turbo_v2",
]

OutputFormat = Literal[
    "mp3_44100_128",
    "mp3_44100_192",
    "pcm_16000",
    "pcm_22050",
    "pcm_24000",
    "pcm_44100",
]


class VoiceSettings(ActionParameters):
    stability: Optional[float] = Field(default=None, ge=0, le=1, description="Stability for the voice (0-1)")
    similarity_boost: Optional[float] = Field(default=None, ge=0, le=1, description="Similarity boost for the voice (0-1)")
    style: Optional[float] = Field(default=None, ge=0, le=1, description="Style exaggeration for the voice (0-1)")
    use_speaker_boost: Optional[bool] = Field(default=None, description="Whether to use speaker boost")


class TextToSpeechParams(ActionParameters):
    text: str = Field(..., min_length=1, max_length=5000, description="The text to convert to speech (1-5000 characters)")
    voice_id: str = Field(..., description="The ID of the voice to use for the conversion")
    model_id: ModelId = Field(default="eleven_multilingual_v2", description="The ID of the model to use")
    output_format: OutputFormat = Field(default="mp3_44100_128", description="The format of the output audio")
    voice_settings: Optional[VoiceSettings] = Field(default=None, description="Optional settings to adjust the voice")
    return_url: bool = Field(default=True, description="Whether to return the audio as a data URL")


class SpeechToTextParams(ActionParameters):
    audio_url: str = Field(..., pattern=r"^https?://", description="URL to the audio file to transcribe")
    model_id: Literal["scribe_v1", "scribe_streaming_v1"] = Field(
        default="scribe_v1", description="The ID of the model to use for transcription"
    )
    include_timestamps: bool = Field(default=False, description="Whether to include word-level timestamps")
    include_confidence: bool = Field(default=False, description="Whether to include confidence scores")


class TranscribedWord(ProviderRecord):
    text: str = ""
    start: Optional[float] = None
    end: Optional[float] = None
    type: Optional[str] = None
    confidence: Optional[float] = None


class Transcription(ProviderRecord):
    text: str = ""
    language_code: Optional[str] = None
    words: List[TranscribedWord] = Field(default_factory=list)
