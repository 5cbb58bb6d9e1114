# inquiry_api/deps.py
from fastapi import Request

from inquiry_api.config import Settings
from inquiry_api.services.inquiry import InquiryHandler


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_inquiry_handler(request: Request) -> InquiryHandler:
    return request.app.state.inquiry_handler
