import logging
from typing import Tuple

logger = logging.getLogger(__name__)


# helpers over owned node chains: every node passed in is relinked, never copied


def chain_length(head, limit: int = None) -> int:
    ''' count the nodes reachable from head, stopping after limit+1 nodes '''

    length = 0
    node = head
    while node is not None:
        length += 1
        if limit is not None and length > limit:
            break
        node = node.next
    return length


def chain_tail(head):
    ''' return the last node of a chain '''

    if head is None:
        return None
    node = head
    while node.next is not None:
        node = node.next
    return node


def split_chain(start, left_len: int) -> Tuple:
    ''' cut the chain after left_len nodes, return the two independent chains '''

    assert left_len >= 1
    node = start
    for _ in range(left_len - 1):
        node = node.next
        assert node is not None, 'chain shorter than expected'
    rest = node.next
    node.next = None
    return start, rest


def merge_chains(left, right) -> Tuple:
    '''
    merge two sorted chains into one, return (head, tail).
    On equal values the node of the left chain goes first.
    '''

    head = tail = None
    while left is not None and right is not None:
        if left.value <= right.value:
            node, left = left, left.next
        else:
            node, right = right, right.next
        node.next = None
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node

    rest = left if left is not None else right
    if rest is not None:
        if tail is None:
            head = rest
        else:
            tail.next = rest
        tail = chain_tail(rest)

    return head, tail


def merge_sort(start, length: int) -> Tuple:
    ''' stable top-down merge sort of a chain of known length, return (head, tail) '''

    if length <= 1:
        return start, start

    left_len = length // 2
    left, right = split_chain(start, left_len)
    left, _ = merge_sort(left, left_len)
    right, _ = merge_sort(right, length - left_len)
    return merge_chains(left, right)


def reverse_chain(head):
    ''' reverse the next links in place, return the new head '''

    prev = None
    node = head
    while node is not None:
        nxt = node.next
        node.next = prev
        prev = node
        node = nxt
    return prev


def copy_bounded(value: str, sp: bytearray, bufsize: int,
                 encoding: str = 'utf-8', errors: str = 'surrogatepass') -> int:
    '''
    copy at most bufsize-1 bytes of value into sp followed by a 0 terminator.
    bufsize is clamped to len(sp). Return the number of data bytes written.
    '''

    bufsize = min(bufsize, len(sp))
    if bufsize <= 0:
        return 0

    data = value.encode(encoding, errors)
    slen = min(len(data), bufsize - 1)
    if slen < len(data):
        logger.debug(f'value truncated from {len(data)} to {slen} bytes')

    sp[:bufsize] = bytes(bufsize)
    sp[:slen] = data[:slen]
    return slen
