"""Async image loading - worker threads decode, the render thread uploads."""

from __future__ import annotations
from collections import deque
from queue import PriorityQueue, Empty
from threading import Thread, Lock
from typing import Callable, Deque, List

from .config import ASYNC_WORKERS, UI_EVENTS_PER_FRAME, TEXTURE_SIZE
from .types import LoadPriority, LoadTask, UIEvent, PreparedImage
from .image_utils import open_image
from .transforms import prepare_card_image
from .logging import log, now

LoaderFunc = Callable[[str], PreparedImage]


def make_card_loader(radius_frac: float, size: int = TEXTURE_SIZE) -> LoaderFunc:
    """Loader function producing rounded, cover-cropped PNG card images."""
    def load(source: str) -> PreparedImage:
        img = open_image(source)
        natural = img.size
        png, w, h = prepare_card_image(img, radius_frac, size)
        return PreparedImage(source=source, png=png, w=w, h=h, natural_size=natural)
    return load


class AsyncImageLoader:
    """Worker pool feeding results back through a locked UI event queue.

    Callbacks never run on worker threads; the owner calls poll_ui_events()
    once per frame on the render thread.
    """

    def __init__(self, loader_func: LoaderFunc, workers: int = ASYNC_WORKERS):
        self.task_queue: PriorityQueue = PriorityQueue()
        self.loader_func = loader_func
        self.running = True
        self.ui_events: Deque[UIEvent] = deque()
        self.ui_lock = Lock()
        self.workers: List[Thread] = []

        for _ in range(workers):
            worker = Thread(target=self._worker_loop, daemon=True)
            worker.start()
            self.workers.append(worker)

    def _worker_loop(self) -> None:
        while self.running:
            try:
                task = self.task_queue.get(timeout=0.1)
            except Empty:
                continue

            result = None
            error = None

            try:
                result = self.loader_func(task.source)
            except Exception as e:
                error = e

            self._push_ui_event(task.callback, (task.source, result, error))
            self.task_queue.task_done()

    def _push_ui_event(self, callback: Callable, args: tuple) -> None:
        with self.ui_lock:
            if not self.running:
                return
            self.ui_events.append(UIEvent(callback, args))

    def poll_ui_events(self, max_events: int = UI_EVENTS_PER_FRAME) -> int:
        """Run up to max_events completed callbacks. Returns how many ran."""
        events_to_process = []
        with self.ui_lock:
            while self.ui_events and len(events_to_process) < max_events:
                events_to_process.append(self.ui_events.popleft())

        for event in events_to_process:
            try:
                event.callback(*event.args)
            except Exception as e:
                log(f"[UI_EVENT][ERR] {e!r}")
        return len(events_to_process)

    def submit(self, source: str, priority: LoadPriority, callback: Callable) -> None:
        if not self.running:
            return
        self.task_queue.put(LoadTask(source, priority, callback, now()))

    def shutdown(self) -> None:
        """Stop workers and drop results that have not been delivered yet."""
        with self.ui_lock:
            if not self.running:
                return
            self.running = False
            self.ui_events.clear()
        for worker in self.workers:
            worker.join(timeout=1.0)
        log("[LOAD] Loader shut down")
