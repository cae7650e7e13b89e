class Node:
    '''
    Expression tree node.

    Trees are built bottom up by the parser, each child owned by exactly one
    parent, and evaluated once.
    '''
    children = ()

    def apply(self, *values):
        '''
        Combine the already evaluated children into this node's value.
        '''
        raise NotImplementedError

    def execute(self):
        '''
        Evaluate the tree, children left to right.

        Walks with an explicit stack, RPN style, so a long left-leaning chain
        like 1+1+...+1 doesn't hit the interpreter's recursion limit.
        '''
        values = []
        pending = [(self, False)]
        while pending:
            node, ready = pending.pop()
            if ready or not node.children:
                arity = len(node.children)
                args = values[len(values) - arity:]
                del values[len(values) - arity:]
                values.append(node.apply(*args))
            else:
                pending.append((node, True))
                pending.extend((child, False)
                               for child
                               in reversed(node.children))
        return values.pop()


class Const(Node):
    def __init__(self, value):
        self.value = value

    def apply(self):
        return self.value

    def __repr__(self):
        return 'Const({!r})'.format(self.value)


class UnaryExpr(Node):
    def __init__(self, operand, operator):
        assert operator.isunary(), operator
        self.operand = operand
        self.operator = operator

    @property
    def children(self):
        return (self.operand,)

    def apply(self, value):
        return self.operator.apply_unary(value)

    def __repr__(self):
        return 'UnaryExpr({!r}, {!r})'.format(self.operand, str(self.operator))


class BinaryExpr(Node):
    def __init__(self, left, right, operator):
        assert operator.isbinary(), operator
        self.left = left
        self.right = right
        self.operator = operator

    @property
    def children(self):
        return (self.left, self.right)

    def apply(self, left, right):
        return self.operator.apply_binary(left, right)

    def __repr__(self):
        return 'BinaryExpr({!r}, {!r}, {!r})'.format(self.left, self.right,
                                                     str(self.operator))
