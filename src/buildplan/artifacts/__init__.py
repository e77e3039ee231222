"""Generated build configuration artifacts.

Every emitter is a pure function of a ProjectPlan (and a SourceScanner where it
needs directory contents) returning the artifact as a list of lines. Same plan
in, same lines out.
"""
