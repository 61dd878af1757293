"""Input schemas and response records for HeyGen actions."""

from typing import List, Literal, Optional

from pydantic import Field

from flashlib.core.models import ActionParameters, ProviderRecord


class ListAvatarsParams(ActionParameters):
    limit: int = Field(default=50, gt=0, description="Maximum number of results to return (default: 50)")
    page: int = Field(default=1, gt=0, description="Page number for pagination (default: 1)")


class ListVoicesParams(ActionParameters):
    limit: int = Field(default=50, gt=0, description="Maximum number of results to return (default: 50)")
    page: int = Field(default=1, gt=0, description="Page number for pagination (default: 1)")
    gender: Optional[Literal["female", "male"]] = Field(default=None, description="Filter voices by gender")
    language: Optional[str] = Field(default=None, description="Filter voices by language code (e.g. 'en-US')")


class Dimension(ActionParameters):
    width: int = Field(..., gt=0, description="Video width in pixels")
    height: int = Field(..., gt=0, description="Video height in pixels")


class VoiceSettings(ActionParameters):
    speed: float = Field(default=1.0, ge=0.5, le=2.0, description="Voice speed (0.5-2)")
    pitch: float = Field(default=0.0, ge=-10, le=10, description="Voice pitch (-10 to 10)")


class Background(ActionParameters):
    type: Literal["color", "image", "video", "transparent"] = Field(..., description="Background type")
    value: str = Field(..., description="Background value (color code, URL, or ID)")


class GenerateAvatarVideoParams(ActionParameters):
    avatar_id: str = Field(..., description="The ID of the avatar to use for the video")
    avatar_style: Literal["normal", "happy", "serious", "sad"] = Field(
        default="normal", description="The style/emotion of the avatar presentation"
    )
    input_text: str = Field(
        ..., min_length=1, max_length=1500, description="The text for the avatar to speak (max 1500 characters)"
    )
    voice_id: str = Field(..., description="The ID of the voice to use")
    voice_settings: Optional[VoiceSettings] = Field(default=None, description="Optional voice settings")
    background: Optional[Background] = Field(default=None, description="Optional background settings")
    dimension: Dimension = Field(
        default_factory=lambda: Dimension(width=1280, height=720),
        description="Video dimensions (default: 1280x720)",
    )
    wait_for_result: bool = Field(
        default=False, description="Whether to wait for video completion (may time out for longer videos)"
    )


class GenerateTalkingPhotoVideoParams(ActionParameters):
    talking_photo_id: str = Field(..., description="The ID of the talking photo to use")
    input_text: str = Field(
        ..., min_length=1, max_length=1500, description="The text for the talking photo to speak (max 1500 characters)"
    )
    voice_id: str = Field(..., description="The ID of the voice to use")
    voice_settings: Optional[VoiceSettings] = Field(default=None, description="Optional voice settings")
    background: Background = Field(
        default_factory=lambda: Background(type="color", value="#FAFAFA"),
        description="Background settings (default: white)",
    )
    dimension: Dimension = Field(
        default_factory=lambda: Dimension(width=1280, height=720),
        description="Video dimensions (default: 1280x720)",
    )
    wait_for_result: bool = Field(
        default=False, description="Whether to wait for video completion (may time out for longer videos)"
    )


class CheckVideoStatusParams(ActionParameters):
    video_id: str = Field(..., description="The ID of the video to check")


class UploadTalkingPhotoParams(ActionParameters):
    photo_url: str = Field(..., pattern=r"^https?://", description="The URL of the photo to upload")
    content_type: Literal["image/jpeg", "image/png"] = Field(
        default="image/jpeg", description="Content type of the image (default: image/jpeg)"
    )


class Avatar(ProviderRecord):
    avatar_id: Optional[str] = None
    name: Optional[str] = Field(default=None, alias="avatar_name")
    avatar_type: Optional[str] = None
    thumbnail_url: Optional[str] = Field(default=None, alias="preview_image_url")
    tags: Optional[List[str]] = None


class Voice(ProviderRecord):
    voice_id: Optional[str] = None
    name: Optional[str] = None
    gender: Optional[str] = None
    language: Optional[str] = None
    country_code: Optional[str] = None
    voice_type: Optional[str] = None
    preview: Optional[str] = Field(default=None, alias="preview_audio")


class VideoStatus(ProviderRecord):
    status: Optional[str] = None
    video_url: Optional[str] = None
    duration: Optional[float] = None
    error: Optional[object] = None


class TalkingPhoto(ProviderRecord):
    talking_photo_id: str
    status: Optional[str] = None
