"""Pre-check hooks run before package verification."""

from pkgprobe.hooks.base import NoopHook, PreCheckHook
from pkgprobe.hooks.remote import RemoteScriptHook, create_hook

__all__ = ["PreCheckHook", "NoopHook", "RemoteScriptHook", "create_hook"]
