"""Descriptions shown to the model for ElevenLabs actions."""

TEXT_TO_SPEECH_PROMPT = """
This tool converts text into natural-sounding speech using the ElevenLabs API.

Required inputs:
- text: The text to convert to speech (1-5000 characters)
- voice_id: The ID of the voice to use (e.g. "JBFqnCBsd6RMkjVDRZzb")

Optional inputs:
- model_id: The model to use (default: "eleven_multilingual_v2")
  Options: "eleven_monolingual_v1", "eleven_multilingual_v1", "eleven_multilingual_v2", "eleven_turbo_v2"
- output_format: Audio format (default: "mp3_44100_128")
  Options: "mp3_44100_128", "mp3_44100_192", "pcm_16000", "pcm_22050", "pcm_24000", "pcm_44100"
- voice_settings: Object with stability, similarity_boost, style and use_speaker_boost
- return_url: Return the audio as a data URL instead of bare base64 (default: true)

Example usage:
```
{
  "text": "The quick brown fox jumps over the lazy dog.",
  "voice_id": "JBFqnCBsd6RMkjVDRZzb",
  "model_id": "eleven_multilingual_v2",
  "output_format": "mp3_44100_128"
}
```

Common voice_id values:
- "JBFqnCBsd6RMkjVDRZzb" - Scarlett (Female)
- "XB0fDUnXU5powFXDhCwa" - Thomas (Male)
- "AZnzlk1XvdvUeBnXmlld" - Freya (Female)
- "g5CIjZEefAph4nQFvHAz" - Josh (Male)
"""

SPEECH_TO_TEXT_PROMPT = """
This tool transcribes spoken audio into text using the ElevenLabs speech-to-text API.

Required inputs:
- audio_url: URL to the audio file to transcribe

Optional inputs:
- model_id: The model to use (default: "scribe_v1")
- include_timestamps: Include word-level timestamps in the results (default: false)
- include_confidence: Include confidence scores for each word (default: false)

Example usage:
```
{
  "audio_url": "https://storage.googleapis.com/eleven-public-cdn/audio/marketing/nicole.mp3",
  "include_timestamps": true
}
```
"""
