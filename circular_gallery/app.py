"""Application - one gallery window and its main loop.

CircularGallery wires together:
- Input polling (InputHandler -> Commands -> InputRouter)
- The frame update (RenderLoop)
- Async image loading and textures (AsyncImageLoader, TextureCache)
- Drawing (Renderer)
"""

from __future__ import annotations
import traceback
from typing import List, Optional

from .state import GalleryState
from .types import GalleryOptions
from .gestures import InputRouter
from .render_loop import RenderLoop
from .commands import Command
from .logging import log
from . import config as cfg


class CircularGallery:
    """
    An infinite, auto-scrolling, draggable carousel of image cards.

    Usage:
        gallery = CircularGallery(GalleryOptions(items=items, on_image_click=print))
        gallery.run()
    """

    def __init__(self, options: Optional[GalleryOptions] = None, title: str = cfg.WINDOW_TITLE):
        self.options = options or GalleryOptions()
        self.title = title
        self.state = GalleryState.from_options(self.options)
        self.router = InputRouter(self.state)
        self.loop: Optional[RenderLoop] = None
        self.destroyed = False

        self._window_open = False
        self._loader = None
        self._textures = None
        self._font = None
        self.renderer = None
        self.input_handler = None

    def start(self) -> RenderLoop:
        """Open the window, start image loading and arm the render loop.

        Returns the loop handle; stop() on it (or on the gallery) ends the run.
        """
        if self.loop is not None:
            return self.loop
        if self.destroyed:
            raise RuntimeError("gallery already destroyed")

        # Imported here so the headless parts of the package never load raylib
        from .rl_compat import rl, RL_VERSION, load_font
        from .loader import AsyncImageLoader, make_card_loader
        from .textures import TextureCache
        from .renderer import Renderer
        from .input_handler import InputHandler

        log(f"[INIT] Opening {self.options.width}x{self.options.height} window ({RL_VERSION})")
        rl.SetConfigFlags(rl.FLAG_WINDOW_RESIZABLE | rl.FLAG_MSAA_4X_HINT | rl.FLAG_WINDOW_HIGHDPI)
        rl.InitWindow(self.options.width, self.options.height, self.title.encode('utf-8')
                      if RL_VERSION == "python-raylib" else self.title)
        self._window_open = True
        rl.SetExitKey(0)
        rl.SetTargetFPS(cfg.TARGET_FPS)

        dpi = rl.GetWindowScaleDPI()
        self.state.resize(rl.GetScreenWidth(), rl.GetScreenHeight(), dpi.x)

        self._loader = AsyncImageLoader(make_card_loader(self.options.border_radius))
        self._textures = TextureCache(self._loader)
        self._textures.request_all(self.state.gallery_items)

        if self.options.font_path:
            self._font = load_font(self.options.font_path, 64)
            if self._font is None:
                log(f"[INIT] Could not load font {self.options.font_path}, using default")

        self.renderer = Renderer(textures=self._textures,
                                 text_color=self.options.text_rgba,
                                 font=self._font)
        self.input_handler = InputHandler()

        self.loop = RenderLoop(self.state, draw=self.renderer.draw_frame).start()
        self.loop.register_update(self._drain_loader)
        log("[INIT] Gallery started")
        return self.loop

    def _drain_loader(self, state: GalleryState) -> None:
        if self._loader is not None:
            self._loader.poll_ui_events()

    def handle_input(self) -> None:
        """Poll the window for input and execute resulting commands."""
        if self.input_handler is None:
            return
        commands: List[Command] = self.input_handler.poll()
        for cmd in commands:
            cmd.execute(self)
            if self.destroyed or (self.loop and not self.loop.running):
                return

    def run(self) -> None:
        """Start if needed and block until the window closes."""
        loop = self.start()
        from .rl_compat import rl

        log("[APP] Starting main loop")
        try:
            loop.run(lambda: not rl.WindowShouldClose(), before_frame=self.handle_input)
        except Exception as e:
            log(f"[APP][CRITICAL] Unhandled exception: {e!r}")
            log(f"[APP][CRITICAL] Traceback:\n{traceback.format_exc()}")
            raise
        finally:
            self.destroy()

    def stop(self) -> None:
        """Stop the main loop; destroy() runs when run() unwinds."""
        if self.loop is not None:
            self.loop.stop()

    def destroy(self) -> None:
        """Release the loop, loader, textures and window. Idempotent."""
        if self.destroyed:
            return
        self.destroyed = True
        log("[APP] Starting cleanup")

        self.stop()
        self.input_handler = None

        if self._loader is not None:
            self._loader.shutdown()
        if self._textures is not None:
            self._textures.close()

        if self._window_open:
            from .rl_compat import rl
            if self._font is not None:
                rl.UnloadFont(self._font)
                self._font = None
            log("[APP] Closing window")
            rl.CloseWindow()
            self._window_open = False

        log("[APP] Cleanup complete")
