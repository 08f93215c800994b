import os
import platform

from hypothesis import settings


# building the test streams is cheap but not free, don't fail on slow runs
settings.register_profile("local", deadline=None)

if "CI" in os.environ:
    # Also we can run more tests there

    max_examples = settings.default.max_examples * 5
    if platform.python_implementation() == "PyPy":
        # PyPy is too slow
        max_examples = settings.default.max_examples

    settings.register_profile(
        "ci",
        deadline=None,
        max_examples=max_examples)
    settings.load_profile("ci")
else:
    settings.load_profile("local")
