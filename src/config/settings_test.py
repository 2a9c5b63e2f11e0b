"""Settings used by the test suite."""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")

from config.settings import *  # noqa: E402,F401,F403

DEBUG = False

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

ALLOWED_HOSTS = ["testserver", "localhost"]

RAZORPAY_KEY_ID = "rzp_test_key"
RAZORPAY_KEY_SECRET = "s3cr3t"
RAZORPAY_WEBHOOK_SECRET = "whsec_test"
RAZORPAY_API_BASE = "https://api.razorpay.test/v1"

STORE_NAME = "Froakie_TCG Store"
