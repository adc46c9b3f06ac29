"""A small row-major matrix built on nested lists."""


class Matrix(list):
    """A list of rows, each a list of values."""

    def __init__(self, rows=()):
        super().__init__(list(row) for row in rows)

    @classmethod
    def zeros(cls, nbrows, nbcols):
        if nbrows <= 0 or nbcols <= 0:
            raise ValueError("a matrix needs at least one row and one column")
        return cls([0.0] * nbcols for _ in range(nbrows))

    @property
    def nbrows(self):
        return len(self)

    @property
    def nbcols(self):
        return len(self[0])

    def redim(self, nbrows, nbcols):
        """Resize in place, keeping existing values and padding with zeros."""
        del self[nbrows:]
        self.extend([] for _ in range(nbrows - len(self)))
        for row in self:
            if len(row) > nbcols:
                del row[nbcols:]
            else:
                row.extend([0.0] * (nbcols - len(row)))

    def reset(self):
        """Set every value to zero, keeping the shape."""
        for row in self:
            row[:] = [0.0] * len(row)

    def __str__(self):
        return "".join("".join(f"{value:g}\t" for value in row) + "\n" for row in self)