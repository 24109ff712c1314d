# Puts the repository root on sys.path so the top-level packages import under pytest.
