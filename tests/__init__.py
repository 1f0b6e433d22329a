"""hostutils test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- e2e/          : The ``hostutils`` command driven through Click's CliRunner.

General guidance
- Keep unit tests fast and deterministic; drive time through the fake clock
  fixture instead of sleeping.
- Property-based tests live with the module they exercise and use @pytest.mark.property.
- Markers: unit, e2e, property
"""
