"""
Core utilities shared across the user lifecycle package.

This package hosts configuration, the cooperative cancellation token and
logging setup. Services and repositories depend on these primitives instead
of reading os.environ or configuring loguru themselves.
"""
