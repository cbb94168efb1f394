from pr_copilot.core.ports.chat_backend import ChatBackend, expect_options

__all__ = ["ChatBackend", "expect_options"]
