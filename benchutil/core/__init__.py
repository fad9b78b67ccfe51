# Path: benchutil/core/__init__.py
"""
benchutil Core Package

Collaborators around the report engine.

Submodules:
    - logger: IPO-aware logging
    - system_info: processor, memory and OS description
    - measurement: turn timed runs into Result values
    - random_data: random strings/bytes/bools for benchmark inputs
    - progress: periodic "still working" dots
"""
