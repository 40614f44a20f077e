import os

# Qt must not need a display in CI
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
