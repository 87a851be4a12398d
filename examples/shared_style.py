# %% [markdown]
# # textstyle: Sharing one style between text objects
#
# Two labels hold the same `TextStyle`. Each keeps a cached layout and drops it
# whenever the style reports a change.

# %%
import logging

from textstyle import TextStyle
from textstyle.utils import setup_logging

setup_logging(logging.DEBUG)


# %%
class Label:
    def __init__(self, text: str, style: TextStyle):
        self.text = text
        self.style = style
        self._layout = None
        style.subscribe(self.invalidate)

    def invalidate(self) -> None:
        self._layout = None

    @property
    def layout(self) -> str:
        if self._layout is None:
            self._layout = f"{self.text!r} in {self.style.font}, fill {self.style.fill}"
        return self._layout


# %%
shared = TextStyle({"fill": 0x336699, "wordWrap": True, "wordWrapWidth": 200})
title = Label("Title", shared)
caption = Label("Caption", shared)
print(title.layout, caption.layout, sep="\n")

# %% [markdown]
# Changing the shared style invalidates both labels; repeating the same value
# does nothing.

# %%
shared.font = "italic 14pt Georgia"
shared.font = "italic 14pt Georgia"
print(title.layout, caption.layout, sep="\n")

# %%
# A clone copies the values but not the subscribers.
highlight = shared.clone()
highlight.fill = "crimson"
print(shared.fill, highlight.fill, highlight.listener_count())
