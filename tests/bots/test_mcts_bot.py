"""
Tests for autoplay.bots.mcts_bot

Tests the four MCTS phases, tree invariants and reproducibility.
"""

import copy

import pytest

from autoplay.bots import MCTSBot, MCTSNode
from autoplay.core.types import DEFAULT_ITERATIONS, GameOver, make_move
from autoplay.games import Nim, create_game_reducer, initial_state


def _original_actions(bot, node):
    """Actions a node was created with (root: own moves; others: all action players)."""
    G, ctx = node.state.G, node.state.ctx
    if node.is_root:
        return list(bot.next_moves(G, ctx, bot.player_id))
    actions = []
    for pid in ctx.action_players:
        actions.extend(bot.next_moves(G, ctx, pid))
    return actions


class TestConstruction:
    """MCTSBot configuration tests."""

    def test_defaults(self, coin_game):
        bot = MCTSBot(game=coin_game, player_id=1)
        assert bot.iterations == DEFAULT_ITERATIONS
        assert bot.player_id == 1
        assert bot.seed is None

    @pytest.mark.parametrize("iterations", [0, None])
    def test_falsy_iterations_use_default(self, coin_game, iterations):
        bot = MCTSBot(game=coin_game, player_id=1, iterations=iterations)
        assert bot.iterations == DEFAULT_ITERATIONS

    def test_default_enumerator_is_game(self, coin_game, coin_state):
        bot = MCTSBot(game=coin_game, player_id=1)
        assert bot.next_moves(coin_state.G, coin_state.ctx, 1) == \
            coin_game.valid_moves(coin_state.G, coin_state.ctx, 1)

    def test_custom_enumerator(self, coin_game, coin_state):
        only_a = lambda G, ctx, pid: [make_move("A", (), pid)] if pid in ctx.action_players else []
        bot = MCTSBot(game=coin_game, player_id=1, next_moves=only_a, seed=1, iterations=10)
        assert bot.play(coin_state).action == make_move("A", (), 1)


class TestCreateNode:
    """create_node() tests."""

    def test_root_uses_own_moves(self, coin_game, coin_state):
        bot = MCTSBot(game=coin_game, player_id=1)
        root = bot.create_node(coin_state, player_id=1)
        assert [a.move for a in root.actions] == ["A", "B"]
        assert root.parent is None and root.parent_action is None
        assert root.visits == 0 and root.value == 0

    def test_internal_node_concatenates_action_players(self, coin_game, coin_state):
        def enumerate_moves(G, ctx, pid):
            return [make_move("X", (), pid)]

        bot = MCTSBot(game=coin_game, player_id=1, next_moves=enumerate_moves)
        state = type(coin_state)(coin_state.G, coin_state.ctx.evolve(action_players=(1, 2)))
        node = bot.create_node(state)
        assert [a.player_id for a in node.actions] == [1, 2]


class TestPhases:
    """select / expand / playout / backpropagate tests."""

    def test_select_stops_at_unexplored(self, coin_game, coin_state):
        bot = MCTSBot(game=coin_game, player_id=1, seed=1)
        root = bot.create_node(coin_state, player_id=1)
        assert bot.select(root) is root

    def test_expand_removes_one_action(self, coin_game, coin_state):
        bot = MCTSBot(game=coin_game, player_id=1, seed=1)
        root = bot.create_node(coin_state, player_id=1)
        child = bot.expand(root)

        assert len(root.actions) == 1
        assert root.children == [child]
        assert child.parent is root
        assert child.parent_action.player_id == 1
        assert child.state.G == [child.parent_action.move]
        assert [a.player_id for a in child.actions] == [2, 2]

    def test_expand_terminal_is_noop(self, coin_game, coin_state):
        bot = MCTSBot(game=coin_game, player_id=1, seed=1)
        done = type(coin_state)(coin_state.G, coin_state.ctx.evolve(gameover=GameOver(winner=1)))
        node = MCTSNode(state=done, actions=[make_move("A", (), 1)])
        assert bot.expand(node) is node
        assert node.children == []

    def test_playout_reaches_result(self, coin_game, coin_state):
        bot = MCTSBot(game=coin_game, player_id=1, seed=1)
        result = bot.playout(bot.create_node(coin_state, player_id=1))
        assert isinstance(result, GameOver)
        assert result.winner in (1, 2)

    def test_playout_on_terminal_returns_result(self, coin_game, coin_state):
        bot = MCTSBot(game=coin_game, player_id=1, seed=1)
        done = type(coin_state)(coin_state.G, coin_state.ctx.evolve(gameover=GameOver(draw=True)))
        assert bot.playout(MCTSNode(state=done)) == GameOver(draw=True)

    def test_playout_without_actors_raises(self, stalled_game):
        bot = MCTSBot(game=stalled_game, player_id=1, seed=1)
        reducer = create_game_reducer(stalled_game)
        stuck = reducer(initial_state(stalled_game), make_move("A", (), 1))
        with pytest.raises(RuntimeError):
            bot.playout(MCTSNode(state=stuck))

    def test_backpropagate_win_credits_mover(self, coin_game, coin_state):
        bot = MCTSBot(game=coin_game, player_id=1, seed=1)
        root = bot.create_node(coin_state, player_id=1)
        child = bot.expand(root)
        grandchild = bot.expand(child)

        bot.backpropagate(grandchild, GameOver(winner=1))

        assert (root.visits, child.visits, grandchild.visits) == (1, 1, 1)
        assert child.value == 1.0          # player 1 made this move
        assert grandchild.value == 0.0     # player 2 made this move
        assert root.value == 0.0

    def test_backpropagate_draw_credits_everyone(self, coin_game, coin_state):
        bot = MCTSBot(game=coin_game, player_id=1, seed=1)
        root = bot.create_node(coin_state, player_id=1)
        child = bot.expand(root)

        bot.backpropagate(child, GameOver(draw=True))

        assert child.value == 0.5
        assert root.value == 0.5


class TestPlay:
    """play() tests."""

    def test_single_iteration(self, coin_game, coin_state):
        """One iteration on a two-action root creates exactly one child."""
        bot = MCTSBot(game=coin_game, player_id=1, seed="one", iterations=1)
        decision = bot.play(coin_state)
        root = decision.metadata

        assert len(root.children) == 1
        assert len(root.actions) == 1
        assert decision.action == root.children[0].parent_action
        assert root.visits == 1

    def test_root_visits_equal_iterations(self, coin_game, coin_state):
        bot = MCTSBot(game=coin_game, player_id=1, seed=2, iterations=37)
        assert bot.play(coin_state).metadata.visits == 37

    def test_returns_most_visited_child(self, tic_tac_toe):
        bot = MCTSBot(game=tic_tac_toe, player_id=1, seed=4, iterations=120)
        decision = bot.play(initial_state(tic_tac_toe))
        root = decision.metadata

        chosen = next(c for c in root.children if c.parent_action == decision.action)
        assert all(chosen.visits >= c.visits for c in root.children)

    def test_tree_invariants(self, tic_tac_toe):
        """value <= visits, expand-once-per-action, acyclic."""
        bot = MCTSBot(game=tic_tac_toe, player_id=1, seed="tree", iterations=200)
        root = bot.play(initial_state(tic_tac_toe)).metadata

        seen = set()
        for node in root.walk():
            assert id(node) not in seen
            seen.add(id(node))

            assert 0 <= node.value <= node.visits

            child_actions = [c.parent_action for c in node.children]
            assert len(set(child_actions)) == len(child_actions)
            assert not set(child_actions) & set(node.actions)
            assert sorted(map(str, child_actions + node.actions)) == \
                sorted(map(str, _original_actions(bot, node)))

            for child in node.children:
                assert child.parent is node
                assert child.visits <= node.visits

    def test_finds_immediate_win(self):
        game = Nim(pile=3, max_take=3)
        bot = MCTSBot(game=game, player_id=1, seed=11, iterations=200)
        assert bot.play(initial_state(game)).action == make_move("take", (3,), 1)

    def test_finds_winning_reply(self, nim):
        """From a pile of 5, only taking 1 leaves the opponent lost."""
        bot = MCTSBot(game=nim, player_id=1, seed=12, iterations=2000)
        assert bot.play(initial_state(nim)).action == make_move("take", (1,), 1)

    def test_terminal_state_raises(self, coin_game, coin_state):
        bot = MCTSBot(game=coin_game, player_id=1, seed=1, iterations=5)
        done = type(coin_state)(coin_state.G, coin_state.ctx.evolve(
            action_players=(), gameover=GameOver(winner=2)))
        with pytest.raises(ValueError):
            bot.play(done)

    def test_fixed_player_count(self, coin_game, coin_state):
        bot = MCTSBot(game=coin_game, player_id=1, seed=1, iterations=5, num_players=2)
        child = bot.play(coin_state).metadata.children[0]
        assert child.state.ctx.num_players == 2


class TestDeterminism:
    """Seeded MCTSBot reproducibility."""

    def test_same_seed_same_search(self, tic_tac_toe):
        state = initial_state(tic_tac_toe)
        a = MCTSBot(game=tic_tac_toe, player_id=1, seed="same", iterations=100)
        b = MCTSBot(game=tic_tac_toe, player_id=1, seed="same", iterations=100)

        da, db = a.play(state), b.play(state)

        assert da.action == db.action
        assert [c.visits for c in da.metadata.children] == [c.visits for c in db.metadata.children]
        assert [c.value for c in da.metadata.children] == [c.value for c in db.metadata.children]
        assert a.prng_state == b.prng_state

    def test_stream_continues_across_decisions(self, tic_tac_toe):
        """A bot rebuilt from a saved state makes the same next decision."""
        state = initial_state(tic_tac_toe)
        original = MCTSBot(game=tic_tac_toe, player_id=1, seed=5, iterations=50)
        original.play(state)
        saved = copy.deepcopy(original.prng_state)

        resumed = MCTSBot(game=tic_tac_toe, player_id=1, seed=5, iterations=50, prng_state=saved)
        assert resumed.play(state).action == original.play(state).action
        assert resumed.prng_state == original.prng_state

    def test_input_state_not_mutated(self, tic_tac_toe):
        state = initial_state(tic_tac_toe)
        before = state.G.copy()
        MCTSBot(game=tic_tac_toe, player_id=1, seed=5, iterations=50).play(state)
        assert (state.G == before).all()
        assert state.ctx.turn == 0
