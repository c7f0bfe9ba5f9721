"""Player icon widget.

Scales and nudges each icon image inside its square box using the per-icon
tuning in ``receiver.core.icons`` so all icons look equally sized.
"""

from kivy.properties import StringProperty
from kivy.uix.image import Image
from kivy.uix.widget import Widget

from receiver.core.icons import icon_geometry, icon_source


class PlayerIcon(Widget):
    icon_id = StringProperty("")

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.image = Image(fit_mode="contain", size_hint=(None, None))
        self.add_widget(self.image)
        self.bind(pos=self._update_image, size=self._update_image,
                  icon_id=self._update_source)
        self._update_source()

    def _update_source(self, *args):
        self.image.source = icon_source(self.icon_id)
        self._update_image()

    def _update_image(self, *args):
        box = min(self.width, self.height)
        size, (dx, dy) = icon_geometry(self.icon_id).place(box)
        self.image.size = (size, size)
        # Offsets are screen-down positive, Kivy's y axis points up
        self.image.center = (self.center_x + dx, self.center_y - dy)
