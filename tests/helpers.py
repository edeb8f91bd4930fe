ADDRESS_1 = ("127.0.0.1", 888)
ADDRESS_2 = ("127.0.0.1", 881)
ADDRESS_3 = ("127.0.0.1", 882)


class FakeTransport:
    """In-memory transport: queued datagrams in, recorded sends out."""

    def __init__(self, datagrams=()):
        self.inbox = list(datagrams)
        self.sent = []

    def receive(self):
        if not self.inbox:
            raise KeyboardInterrupt
        return self.inbox.pop(0)

    def send_to(self, data, address):
        self.sent.append((data.decode("utf-8"), address))
