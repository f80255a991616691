
class KeyBSTError(Exception):
    def __str__(self):
        return ''.join(map(str, self.args))

class OrderViolationError(KeyBSTError):
    def __init__(self, key, low=None, high=None):
        super(OrderViolationError, self).__init__(key, low, high)
        self.key = key
        self.low = low
        self.high = high

    def __str__(self):
        bounds = []
        if self.low is not None:
            bounds.append('> ' + repr(self.low))
        if self.high is not None:
            bounds.append('< ' + repr(self.high))
        return ('key ' + repr(self.key) + ' out of order, expected ' +
                ' and '.join(bounds))
