import math


def child_potential(wins, losses, visit_count, log_parent_visits, C):
    """
    Upper-confidence potential of a child as seen by its parent's mover.

    wins/losses are counted for the player to move at the child, so the
    parent's mover gains from the child's losses.
    """
    exploit = (losses - wins) / visit_count
    explore = C * math.sqrt(log_parent_visits / visit_count)
    return exploit + explore
