"""
Trailing-edge debouncing for filter input.
"""
import threading


class Debouncer:
    """
    Call ``fn`` once ``wait`` seconds have passed without another call.

    Each call restarts the countdown and replaces the pending arguments;
    only the last call's arguments reach ``fn``.

    Usage:
        debounced = Debouncer(0.5, state.update_filters)
        debounced({'code': 'J'})
        debounced({'code': 'JK'})   # only this one runs, 0.5s later
    """

    def __init__(self, wait, fn, timer_factory=threading.Timer):
        self.wait = wait
        self.fn = fn
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer = None
        self._pending = None
        self._generation = 0

    def __call__(self, *args, **kwargs):
        with self._lock:
            self._cancel_timer()
            self._generation += 1
            self._pending = (args, kwargs)
            self._timer = self._timer_factory(self.wait, self._fire, args=(self._generation,))
            self._timer.daemon = True
            self._timer.start()

    @property
    def pending(self):
        return self._pending is not None

    def _cancel_timer(self):
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _take_pending(self, generation=None):
        with self._lock:
            # A timer that was replaced or cancelled must not run
            if generation is not None and generation != self._generation:
                return None
            pending, self._pending = self._pending, None
            self._cancel_timer()
            return pending

    def _fire(self, generation):
        pending = self._take_pending(generation)
        if pending is not None:
            args, kwargs = pending
            self.fn(*args, **kwargs)

    def flush(self):
        """Run the pending call now, if any. Returns True when one ran."""
        pending = self._take_pending()
        if pending is None:
            return False
        args, kwargs = pending
        self.fn(*args, **kwargs)
        return True

    def cancel(self):
        """Drop the pending call without running it."""
        with self._lock:
            self._generation += 1
            self._pending = None
            self._cancel_timer()
