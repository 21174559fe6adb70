"""helperkit test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/function.

General guidance
- Keep tests fast and deterministic (no real I/O).
- Property-based tests live next to the example-based tests of the same module
  and use @pytest.mark.property.
- Markers: unit, property
"""
