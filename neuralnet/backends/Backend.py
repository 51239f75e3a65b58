class Backend:
    """
    Deferred task queue. enqueue() registers a call and returns its handle,
    process() runs everything queued and returns the results in the order
    the tasks were enqueued, then empties the queue.
    """

    def __init__(self):
        self.queue = []

    def enqueue(self, fn, *args):
        self.queue.append((fn, args))
        return len(self.queue) - 1

    def process(self):
        raise NotImplementedError

    def flush(self):
        self.queue = []

    def __len__(self):
        return len(self.queue)

    def __repr__(self):
        return f"{type(self).__name__}()"
