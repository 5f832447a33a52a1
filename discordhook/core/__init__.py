"""Payload and request body encoding."""

from discordhook.core.multipart import MultipartBody, build_multipart
from discordhook.core.payload import build_payload, encode_payload

__all__ = ["MultipartBody", "build_multipart", "build_payload", "encode_payload"]
