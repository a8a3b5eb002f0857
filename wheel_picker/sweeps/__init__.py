"""Auto-discovery of hue sweep modules.

Every .py file in this package that defines a `sweep` object is
auto-registered by wheel_picker.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in the frozen binary. Without them, pkgutil.iter_modules cannot find
the sweep files at runtime.
"""

# PyInstaller hidden imports — keep this list in sync with sweep modules
import wheel_picker.sweeps.cursor as _cursor  # noqa: F401
import wheel_picker.sweeps.hsv as _hsv  # noqa: F401
