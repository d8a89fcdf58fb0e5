# timer grabbed from
# https://stackoverflow.com/questions/7370801/measure-time-elapsed-in-python
from timeit import default_timer as timer


class Timer:

    def __init__(self, msg, fmt="%0.3g", verbose=True):
        """
        Measure the wall-clock time spent in a with block, e.g., draining a Partitions generator in count_partitions.
        :param msg: the message printed before the elapsed time
        :param fmt: the printf-style format of the elapsed time
        :param verbose: print the elapsed time on exit if True
        """
        self.msg = msg
        self.fmt = fmt
        self.verbose = verbose
        self.time = None

    def __enter__(self):
        self.start = timer()
        return self

    def __exit__(self, *args):
        self.time = timer() - self.start
        if self.verbose:
            print(("%s : " + self.fmt + " seconds") % (self.msg, self.time))
