"""Worked solutions to the homework exercises."""