"""HeyGen video generation actions."""

import logging
from typing import Any, Dict, List, Optional

from flashlib.actions.base import Action, bind_config
from flashlib.actions.polling import wait_for_job
from flashlib.core.errors import ProviderError
from flashlib.providers.core.http import parse_record, parse_records, query_params, request_bytes, request_json

from .config import HeyGenConfig
from .models import (
    Avatar,
    CheckVideoStatusParams,
    GenerateAvatarVideoParams,
    GenerateTalkingPhotoVideoParams,
    ListAvatarsParams,
    ListVoicesParams,
    TalkingPhoto,
    UploadTalkingPhotoParams,
    VideoStatus,
    Voice,
)
from .prompts import (
    CHECK_VIDEO_STATUS_PROMPT,
    GENERATE_AVATAR_VIDEO_PROMPT,
    GENERATE_TALKING_PHOTO_VIDEO_PROMPT,
    LIST_AVATARS_PROMPT,
    LIST_VOICES_PROMPT,
    UPLOAD_TALKING_PHOTO_PROMPT,
)

logger = logging.getLogger(__name__)

PROVIDER = "heygen"
URL_EXPIRY_NOTE = "Note: The video URL will expire in 7 days."


def _list_items(payload: Any, key: str) -> List[Dict[str, Any]]:
    """Extract the item list from ``{"data": [...]}`` or ``{"data": {key: [...]}}``."""
    data = payload.get("data") if isinstance(payload, dict) else None
    if isinstance(data, dict):
        data = data.get(key)
    return data if isinstance(data, list) else []


def _pagination_footer(kind: str, page: int, limit: int, has_next: bool) -> str:
    footer = f"Page: {page} | Limit: {limit}\n"
    if has_next:
        footer += f"There are more {kind} available. Use page={page + 1} to see the next page.\n"
    return footer


async def fetch_video_status(config: HeyGenConfig, video_id: str) -> Dict[str, Any]:
    """Fetch the raw status record for a video."""
    payload = await request_json(
        "GET",
        f"{config.base_url}/v1/video_status.get",
        provider=PROVIDER,
        operation="check_video_status",
        headers=config.headers(),
        params={"video_id": video_id},
    )
    data = payload.get("data") if isinstance(payload, dict) else None
    return data if isinstance(data, dict) else {}


def format_video_completion(video: VideoStatus, video_id: str) -> str:
    if video.status == "completed":
        return (
            "Video is ready!\n"
            f"- Video URL: {video.video_url}\n"
            f"- Duration: {video.duration} seconds\n"
            f"\n{URL_EXPIRY_NOTE}"
        )
    text = f"Video generation is {video.status}.\n"
    if video.status == "failed":
        text += f"Error: {video.error or 'Unknown error'}\n"
    else:
        text += f"Please check the status later using the video_id: {video_id}\n"
    return text


async def _submit_video(
    config: HeyGenConfig, payload: Dict[str, Any], wait_for_result: bool, label: str
) -> str:
    response = await request_json(
        "POST",
        f"{config.base_url}/v2/video/generate",
        provider=PROVIDER,
        operation="generate_video",
        headers={**config.headers(), "Content-Type": "application/json"},
        json=payload,
    )
    data = response.get("data") if isinstance(response, dict) else None
    data = data if isinstance(data, dict) else {}
    video_id = data.get("video_id")
    result = f"Successfully initiated {label}:\n"
    result += f"- Video ID: {video_id}\n"
    result += f"- Status: {data.get('status')}\n\n"

    if not wait_for_result:
        result += f"To check video status later, use the video_id: {video_id}\n"
        result += "You can check the status using the check_heygen_video_status tool."
        return result

    result += "Waiting for video completion...\n\n"
    final = await wait_for_job(lambda job_id: fetch_video_status(config, job_id), video_id)
    video = parse_record(VideoStatus, final, provider=PROVIDER, operation="check_video_status")
    return result + format_video_completion(video, video_id)


def _voice_block(args: Dict[str, Any]) -> Dict[str, Any]:
    voice: Dict[str, Any] = {
        "type": "text",
        "input_text": args.get("input_text"),
        "voice_id": args.get("voice_id"),
    }
    settings = args.get("voice_settings")
    if settings:
        voice["speed"] = settings.get("speed", 1.0)
        voice["pitch"] = settings.get("pitch", 0.0)
    return voice


async def list_heygen_avatars(config: HeyGenConfig, args: Dict[str, Any]) -> str:
    """List avatars available to the account."""
    limit = args.get("limit") or 50
    page = args.get("page") or 1
    try:
        payload = await request_json(
            "GET",
            f"{config.base_url}/v2/avatars",
            provider=PROVIDER,
            operation="list_avatars",
            headers=config.headers(),
            params=query_params(limit=limit, page=page),
        )
    except ProviderError as e:
        raise e.with_prefix("Failed to list avatars")

    avatars = parse_records(Avatar, _list_items(payload, "avatars"), provider=PROVIDER, operation="list_avatars")
    if not avatars:
        return "No avatars found."

    result = f"Found {len(avatars)} available avatars:\n\n"
    for avatar in avatars:
        result += f"## {avatar.name or 'Unnamed Avatar'}\n"
        result += f"- Avatar ID: {avatar.avatar_id}\n"
        if avatar.avatar_type:
            result += f"- Type: {avatar.avatar_type}\n"
        if avatar.thumbnail_url:
            result += f"- Thumbnail: {avatar.thumbnail_url}\n"
        if avatar.tags:
            result += f"- Tags: {', '.join(avatar.tags)}\n"
        result += "\n"
    return result + _pagination_footer("avatars", page, limit, bool(payload.get("has_next")))


async def list_heygen_voices(config: HeyGenConfig, args: Dict[str, Any]) -> str:
    """List voices, optionally filtered by gender and language."""
    limit = args.get("limit") or 50
    page = args.get("page") or 1
    try:
        payload = await request_json(
            "GET",
            f"{config.base_url}/v2/voices",
            provider=PROVIDER,
            operation="list_voices",
            headers=config.headers(),
            params=query_params(
                limit=limit, page=page, gender=args.get("gender"), language=args.get("language")
            ),
        )
    except ProviderError as e:
        raise e.with_prefix("Failed to list voices")

    voices = parse_records(Voice, _list_items(payload, "voices"), provider=PROVIDER, operation="list_voices")
    if not voices:
        return "No voices found."

    result = f"Found {len(voices)} available voices:\n\n"
    for voice in voices:
        result += f"## {voice.name or 'Unnamed Voice'}\n"
        result += f"- Voice ID: {voice.voice_id}\n"
        for label, value in (
            ("Gender", voice.gender),
            ("Language", voice.language),
            ("Country", voice.country_code),
            ("Type", voice.voice_type),
            ("Preview URL", voice.preview),
        ):
            if value:
                result += f"- {label}: {value}\n"
        result += "\n"
    return result + _pagination_footer("voices", page, limit, bool(payload.get("has_next")))


async def generate_heygen_avatar_video(config: HeyGenConfig, args: Dict[str, Any]) -> str:
    """Submit an avatar video render, optionally waiting for it to finish."""
    config.require_api_key()
    video_input: Dict[str, Any] = {
        "character": {
            "type": "avatar",
            "avatar_id": args.get("avatar_id"),
            "avatar_style": args.get("avatar_style") or "normal",
        },
        "voice": _voice_block(args),
    }
    if args.get("background"):
        video_input["background"] = args["background"]
    payload = {
        "video_inputs": [video_input],
        "dimension": args.get("dimension") or {"width": 1280, "height": 720},
    }
    try:
        return await _submit_video(
            config, payload, bool(args.get("wait_for_result", False)), "video generation"
        )
    except ProviderError as e:
        raise e.with_prefix("Failed to generate video")


async def upload_heygen_talking_photo(config: HeyGenConfig, args: Dict[str, Any]) -> str:
    """Download a photo and upload it to HeyGen as a talking photo."""
    headers = {"X-Api-Key": config.require_api_key(), "Content-Type": args.get("content_type") or "image/jpeg"}
    try:
        image = await request_bytes("GET", args.get("photo_url"), provider=PROVIDER, operation="download_photo")
        response = await request_json(
            "POST",
            f"{config.upload_url}/v1/talking_photo",
            provider=PROVIDER,
            operation="upload_talking_photo",
            headers=headers,
            data=image,
        )
        data = response.get("data") if isinstance(response, dict) else None
        photo = parse_record(TalkingPhoto, data, provider=PROVIDER, operation="upload_talking_photo")
    except ProviderError as e:
        raise e.with_prefix("Failed to upload talking photo")

    result = "Successfully uploaded talking photo:\n"
    result += f"- Talking Photo ID: {photo.talking_photo_id}\n"
    if photo.status:
        result += f"- Status: {photo.status}\n"
    result += (
        "\nTo create a video with this talking photo, use the generate_heygen_talking_photo_video tool "
        "with this talking_photo_id."
    )
    return result


async def generate_heygen_talking_photo_video(config: HeyGenConfig, args: Dict[str, Any]) -> str:
    """Submit a talking photo video render, optionally waiting for it to finish."""
    config.require_api_key()
    payload = {
        "video_inputs": [
            {
                "character": {
                    "type": "talking_photo",
                    "talking_photo_id": args.get("talking_photo_id"),
                },
                "voice": _voice_block(args),
                "background": args.get("background") or {"type": "color", "value": "#FAFAFA"},
            }
        ],
        "dimension": args.get("dimension") or {"width": 1280, "height": 720},
    }
    try:
        return await _submit_video(
            config, payload, bool(args.get("wait_for_result", False)), "talking photo video generation"
        )
    except ProviderError as e:
        raise e.with_prefix("Failed to generate talking photo video")


async def check_heygen_video_status(config: HeyGenConfig, args: Dict[str, Any]) -> str:
    """Report the status of a video render."""
    video_id = args.get("video_id")
    try:
        video = parse_record(
            VideoStatus, await fetch_video_status(config, video_id), provider=PROVIDER, operation="check_video_status"
        )
    except ProviderError as e:
        raise e.with_prefix("Failed to check video status")

    result = f"Video status for ID {video_id}:\n"
    result += f"- Status: {video.status}\n"
    if video.status == "completed":
        result += f"- Video URL: {video.video_url}\n"
        if video.duration:
            result += f"- Duration: {video.duration} seconds\n"
        result += f"\n{URL_EXPIRY_NOTE}"
    elif video.status == "failed":
        result += f"- Error: {video.error or 'Unknown error'}\n"
    else:
        result += "\nThe video is still being processed. Check again later."
    return result


def get_heygen_actions(config: Optional[HeyGenConfig] = None) -> List[Action]:
    """Build the HeyGen action set.

    Args:
        config: Explicit configuration; replaces the HeyGen singleton and is
            bound into every returned action

    Returns:
        HeyGen actions in registration order
    """
    resolve = HeyGenConfig.resolver(config)
    return [
        Action("list_heygen_avatars", LIST_AVATARS_PROMPT, ListAvatarsParams,
               bind_config(list_heygen_avatars, resolve)),
        Action("list_heygen_voices", LIST_VOICES_PROMPT, ListVoicesParams,
               bind_config(list_heygen_voices, resolve)),
        Action("generate_heygen_avatar_video", GENERATE_AVATAR_VIDEO_PROMPT, GenerateAvatarVideoParams,
               bind_config(generate_heygen_avatar_video, resolve)),
        Action("upload_heygen_talking_photo", UPLOAD_TALKING_PHOTO_PROMPT, UploadTalkingPhotoParams,
               bind_config(upload_heygen_talking_photo, resolve)),
        Action("generate_heygen_talking_photo_video", GENERATE_TALKING_PHOTO_VIDEO_PROMPT,
               GenerateTalkingPhotoVideoParams, bind_config(generate_heygen_talking_photo_video, resolve)),
        Action("check_heygen_video_status", CHECK_VIDEO_STATUS_PROMPT, CheckVideoStatusParams,
               bind_config(check_heygen_video_status, resolve)),
    ]
