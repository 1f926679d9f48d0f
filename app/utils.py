# -*- coding: utf-8 -*-
# Time       : 2025/9/2 21:07
# Author     : QIN2DIM
# GitHub     : https://github.com/QIN2DIM
# Description: loguru sinks
from __future__ import annotations

import functools
import os
import sys
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from loguru import logger


def resolve_log_timezone(name: str | None) -> ZoneInfo:
    """LOG_TIMEZONE -> ZoneInfo, falls back to UTC on an unknown zone name"""
    try:
        return ZoneInfo(name or "UTC")
    except (ZoneInfoNotFoundError, ValueError) as err:
        logger.warning(f"Invalid LOG_TIMEZONE {name!r}, using UTC - {err}")
        return ZoneInfo("UTC")


def timezone_filter(record, tz: ZoneInfo):
    record["time"] = record["time"].astimezone(tz)
    return record


def init_log(**sink_channel):
    log_level = os.getenv("LOG_LEVEL", "DEBUG").upper()
    log_filter = functools.partial(
        timezone_filter, tz=resolve_log_timezone(os.getenv("LOG_TIMEZONE", "UTC"))
    )

    persistent_format = (
        "<g>{time:YYYY-MM-DD HH:mm:ss}</g> | "
        "<lvl>{level}</lvl>    | "
        "<c><u>{name}</u></c>:{function}:{line} | "
        "{message} - "
        "{extra}"
    )
    stdout_format = (
        "<g>{time:YYYY-MM-DD HH:mm:ss}</g> | "
        "<lvl>{level:<8}</lvl>    | "
        "<c>{name}</c>:<c>{function}</c>:<c>{line}</c> | "
        "<n>{message}</n>"
    )

    logger.remove()
    logger.add(
        sink=sys.stdout,
        colorize=True,
        level=log_level,
        format=stdout_format,
        diagnose=False,
        filter=log_filter,
    )
    if sink_channel.get("error"):
        logger.add(
            sink=sink_channel.get("error"),
            level="ERROR",
            rotation="5 MB",
            retention="7 days",
            encoding="utf8",
            diagnose=False,
            filter=log_filter,
        )
    if sink_channel.get("runtime"):
        logger.add(
            sink=sink_channel.get("runtime"),
            level="TRACE",
            rotation="5 MB",
            retention="7 days",
            encoding="utf8",
            diagnose=False,
            filter=log_filter,
        )
    if sink_channel.get("serialize"):
        logger.add(
            sink=sink_channel.get("serialize"),
            level="DEBUG",
            format=persistent_format,
            rotation="5 MB",
            retention="7 days",
            encoding="utf8",
            diagnose=False,
            serialize=True,
            filter=log_filter,
        )
    return logger
