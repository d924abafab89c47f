from skinkit.ui.widgets.factory import create_component
from skinkit.ui.widgets.image import ImageComponent
from skinkit.ui.widgets.nine_patch import NinePatchComponent
from skinkit.ui.widgets.text import TextComponent
from skinkit.ui.widgets.text_list import TextListComponent

__all__ = [
    "ImageComponent",
    "NinePatchComponent",
    "TextComponent",
    "TextListComponent",
    "create_component",
]
