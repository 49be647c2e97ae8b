import logging

import listutils

logger = logging.getLogger(__name__)


class Node:
    __slots__ = ('value', 'next')

    def __init__(self, value: str):
        # plain str, never a caller-owned subclass instance
        self.value: str = str.__str__(value)
        self.next: Node = None


class Queue:
    ''' queue of strings implemented using a singly linked list '''

    ENCODING = 'utf-8'
    ENCODING_ERRORS = 'surrogatepass'

    def __init__(self):
        self.head: Node = None
        self.tail: Node = None
        self.count: int = 0

    def is_empty(self) -> bool:
        return self.count == 0

    def size(self) -> int:
        return self.count

    def __len__(self):
        return self.count

    def _new_node(self, s) -> Node | None:
        if not isinstance(s, str):
            logger.debug(f'rejected element of type {type(s).__name__}')
            return None
        try:
            return Node(s)
        except MemoryError:
            logger.warning('could not allocate node')
            return None

    def insert_head(self, s: str) -> bool:
        ''' insert a copy of s at the head, return False on failure '''

        node = self._new_node(s)
        if node is None:
            return False

        if self.tail is None:
            self.tail = node
        node.next = self.head
        self.head = node
        self.count += 1
        return True

    def insert_tail(self, s: str) -> bool:
        ''' insert a copy of s at the tail, return False on failure '''

        node = self._new_node(s)
        if node is None:
            return False

        if self.head is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self.count += 1
        return True

    def remove_head(self, sp: bytearray = None, bufsize: int = 0) -> bool:
        '''
        remove the head element, return False if the queue is empty.
        If sp is given, the removed string is copied into it (at most
        bufsize-1 bytes plus a 0 terminator).
        '''

        if self.count == 0:
            return False

        target = self.head
        if sp is not None:
            listutils.copy_bounded(target.value, sp, bufsize,
                                   self.ENCODING, self.ENCODING_ERRORS)

        self.head = target.next
        if self.head is None:
            self.tail = None
        target.next = None
        self.count -= 1
        return True

    def pop(self) -> str:
        assert not self.is_empty()
        value = self.head.value
        self.remove_head()
        return value

    def first(self) -> str:
        assert not self.is_empty()
        return self.head.value

    def last(self) -> str:
        assert not self.is_empty()
        return self.tail.value

    def reverse(self):
        ''' reverse the elements in place, no node is allocated or freed '''

        if self.count < 2:
            return

        listutils.reverse_chain(self.head)
        tmp = self.head
        self.head = self.tail
        self.tail = tmp
        self.tail.next = None
        logger.debug(f'reversed {self.count} elements')

    def sort(self):
        ''' stable ascending merge sort of the elements '''

        if self.count < 2:
            return

        self.head, self.tail = listutils.merge_sort(self.head, self.count)
        assert self.tail.next is None
        logger.debug(f'sorted {self.count} elements')

    def free(self):
        ''' release every node, leaving the queue empty '''

        freed = 0
        node = self.head
        while node is not None:
            nxt = node.next
            node.next = None
            node.value = None
            node = nxt
            freed += 1
        self.head = self.tail = None
        self.count = 0
        logger.debug(f'freed {freed} nodes')

    def check(self) -> bool:
        ''' verify the list invariants '''

        if self.count == 0:
            return self.head is None and self.tail is None
        if self.head is None or self.tail is None or self.tail.next is not None:
            return False
        if self.count == 1 and self.head is not self.tail:
            return False
        if listutils.chain_length(self.head, limit=self.count) != self.count:
            return False
        if listutils.chain_tail(self.head) is not self.tail:
            return False
        return all(type(value) is str for value in self)

    def __iter__(self):
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def to_list(self) -> list[str]:
        return list(self)

    def __repr__(self):
        return f'Queue({self.to_list()!r})'


# operations accepting None as the "no queue" sentinel


def new() -> Queue | None:
    ''' create an empty queue, None if it could not be allocated '''

    try:
        return Queue()
    except MemoryError:
        logger.warning('could not allocate queue')
        return None


def free(q: Queue | None):
    if q is None:
        return
    q.free()


def insert_head(q: Queue | None, s: str) -> bool:
    if q is None:
        logger.debug('insert_head on missing queue')
        return False
    return q.insert_head(s)


def insert_tail(q: Queue | None, s: str) -> bool:
    if q is None:
        logger.debug('insert_tail on missing queue')
        return False
    return q.insert_tail(s)


def remove_head(q: Queue | None, sp: bytearray = None, bufsize: int = 0) -> bool:
    if q is None:
        logger.debug('remove_head on missing queue')
        return False
    return q.remove_head(sp, bufsize)


def size(q: Queue | None) -> int:
    if q is None:
        return 0
    return q.count


def reverse(q: Queue | None):
    if q is None:
        return
    q.reverse()


def sort(q: Queue | None):
    if q is None:
        return
    q.sort()
