"""
User interface module.

Organized into layers:
- primitives/: Terminal I/O (keyboard, colors, terminal driver)
- components/: Layout arithmetic, box rows, frame rendering
- widgets/: Interactive pieces (navigation, menu)

Import from the subpackages directly; core.config depends on components,
so this package re-exports nothing to keep imports acyclic.
"""
