"""Descriptions shown to the model for HeyGen actions."""

LIST_AVATARS_PROMPT = """
This tool fetches available avatars from HeyGen, including instant avatars.

Optional inputs:
- limit: Maximum number of results to return (default: 50)
- page: Page number for pagination (default: 1)

The response lists avatars with their IDs, names and other details.
Use the avatar_id in subsequent requests to generate videos.

Example usage:
```
{
  "limit": 10,
  "page": 1
}
```
"""

LIST_VOICES_PROMPT = """
This tool fetches available voices from HeyGen.

Optional inputs:
- limit: Maximum number of results to return (default: 50)
- page: Page number for pagination (default: 1)
- gender: Filter voices by gender ('female' or 'male')
- language: Filter voices by language code (e.g. 'en-US', 'es-ES')

The response lists voices with their IDs, names and other details.
Use the voice_id in subsequent requests to generate videos.

Example usage:
```
{
  "limit": 10,
  "gender": "female",
  "language": "en-US"
}
```
"""

GENERATE_AVATAR_VIDEO_PROMPT = """
This tool generates videos with AI avatars using HeyGen.

Required inputs:
- avatar_id: The ID of the avatar to use (from list_heygen_avatars)
- input_text: The text for the avatar to speak (max 1500 characters)
- voice_id: The ID of the voice to use (from list_heygen_voices)

Optional inputs:
- avatar_style: Avatar emotion ("normal", "happy", "serious", "sad")
- voice_settings: Object with speed (0.5-2) and pitch (-10 to 10)
- background: Object with type and value (e.g. {"type": "color", "value": "#FAFAFA"})
- dimension: Video dimensions (default: {"width": 1280, "height": 720})
- wait_for_result: Whether to wait for video completion (default: false)

Example usage:
```
{
  "avatar_id": "Angela-inTshirt-20220820",
  "input_text": "Welcome to HeyGen! This is a demo of our avatar video technology.",
  "voice_id": "1bd001e7e50f421d891986aad5158bc8",
  "avatar_style": "happy"
}
```
"""

GENERATE_TALKING_PHOTO_VIDEO_PROMPT = """
This tool generates videos with "Talking Photos" using HeyGen.

Required inputs:
- talking_photo_id: The ID of the talking photo to use
- input_text: The text for the talking photo to speak (max 1500 characters)
- voice_id: The ID of the voice to use (from list_heygen_voices)

Optional inputs:
- voice_settings: Object with speed (0.5-2) and pitch (-10 to 10)
- background: Object with type and value (default: {"type": "color", "value": "#FAFAFA"})
- dimension: Video dimensions (default: {"width": 1280, "height": 720})
- wait_for_result: Whether to wait for video completion (default: false)

Example usage:
```
{
  "talking_photo_id": "tp_abcdefg123456",
  "input_text": "With HeyGen, it is very easy to create talking photo videos.",
  "voice_id": "d7bbcdd6964c47bdaae26decade4a933"
}
```
"""

CHECK_VIDEO_STATUS_PROMPT = """
This tool checks the status of a HeyGen video generation job.

Required inputs:
- video_id: The ID of the video to check (from generate_heygen_avatar_video or
  generate_heygen_talking_photo_video)

The response gives the current status of the video and, once completed, the
URL to access it.

Example usage:
```
{
  "video_id": "7f6754ab-cd3e-40a4-8645-e45151c9a9b1"
}
```
"""

UPLOAD_TALKING_PHOTO_PROMPT = """
This tool uploads a photo to HeyGen to create a "Talking Photo" that can be animated.

Required inputs:
- photo_url: The URL of the photo to upload

Optional inputs:
- content_type: Content type of the image ("image/jpeg" or "image/png", default: "image/jpeg")

The photo should meet these requirements:
- The face is intact and clearly visible
- Recommend using real human faces
- Only one face shows in the photo
- The resolution of the face area is larger than 200x200 pixels

The returned talking_photo_id can be used with generate_heygen_talking_photo_video.
"""
