from pr_copilot.infrastructure.invocation.bounded_invoker import BoundedInvoker, classify_failure

__all__ = ["BoundedInvoker", "classify_failure"]
