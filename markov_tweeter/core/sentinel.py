# sentinel.py - the "sentence ends here" successor value


class EndOfSentence:
    """
    Singleton marker recorded as the successor of a sentence's last word.
    Distinct from every real token and from None ("no entry").
    """

    _instance = None
    __slots__ = ()

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<END>"

    def __reduce__(self):
        return (EndOfSentence, ())


END = EndOfSentence()
