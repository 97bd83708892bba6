"""Google reCAPTCHA adapter."""

from .client import MockRecaptchaVerifier, RealRecaptchaVerifier, RecaptchaVerifier

__all__ = ["RecaptchaVerifier", "RealRecaptchaVerifier", "MockRecaptchaVerifier"]
