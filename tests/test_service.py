import pytest

from brickbreak.collision import CollisionService, CollisionSide, WallCollision
from brickbreak.entities import Ball, Brick, BrickKind, Paddle
from brickbreak.geometry import Dimensions, Position, Velocity
from brickbreak.service import GameService
from brickbreak.state import GameState, GameStatus, InputSnapshot


class NoCollision:
    def ball_hits_wall(self, ball, world_width, world_height):
        return WallCollision.NONE

    def ball_hits_paddle(self, ball, paddle):
        return False

    def ball_hits_brick(self, ball, brick):
        return None


class AlwaysBottomWall(NoCollision):
    def ball_hits_wall(self, ball, world_width, world_height):
        return WallCollision.BOTTOM


class AlwaysBrickHit(NoCollision):
    def ball_hits_brick(self, ball, brick):
        return None if brick.is_destroyed() else CollisionSide.TOP


class FixedScorer:
    def __init__(self, value):
        self.value = value

    def score_for_brick(self, brick, combo):
        return self.value


def make_state():
    ball = Ball(Position(400.0, 300.0), Velocity(0.0, -300.0), 8.0)
    paddle = Paddle(Position(400.0, 560.0), Dimensions(100.0, 14.0), 400.0)
    return GameState(ball, paddle, [], 800.0, 600.0)


def playing_state():
    state = make_state()
    state.status = GameStatus.PLAYING
    return state


def normal_brick():
    return Brick(Position(390.0, 295.0), Dimensions(60.0, 20.0), BrickKind.NORMAL)


def svc_no_collision():
    return GameService(NoCollision(), FixedScorer(0))


def test_launch_transitions_status_to_playing():
    state = make_state()
    svc_no_collision().update(state, InputSnapshot(launch=True), 0.016)
    assert state.status is GameStatus.PLAYING
    assert state.ball.velocity == Velocity(180.0, -320.0)


def test_ball_does_not_move_before_launch():
    state = make_state()
    svc_no_collision().update(state, InputSnapshot(), 0.016)
    assert state.status is GameStatus.WAITING_TO_LAUNCH
    assert state.ball.position.x == state.paddle.position.x
    assert state.ball.position.y == 544.0


def test_ball_moves_when_playing():
    state = playing_state()
    y_before = state.ball.position.y
    svc_no_collision().update(state, InputSnapshot(), 0.016)
    assert state.ball.position.y == pytest.approx(y_before - 300.0 * 0.016)


def test_pause_toggles_status():
    svc = svc_no_collision()
    state = playing_state()
    pause = InputSnapshot(pause=True)
    svc.update(state, pause, 0.016)
    assert state.status is GameStatus.PAUSED
    svc.update(state, pause, 0.016)
    assert state.status is GameStatus.PLAYING


def test_bottom_wall_decrements_life():
    state = playing_state()
    GameService(AlwaysBottomWall(), FixedScorer(0)).update(state, InputSnapshot(), 0.016)
    assert state.lives == 2
    assert state.status is GameStatus.WAITING_TO_LAUNCH
    assert state.ball.velocity == Velocity(0.0, 0.0)


def test_game_over_when_zero_lives_remain():
    state = playing_state()
    state.lives = 1
    GameService(AlwaysBottomWall(), FixedScorer(0)).update(state, InputSnapshot(), 0.016)
    assert state.status is GameStatus.GAME_OVER
    assert state.lives == 0


def test_brick_destruction_awards_score():
    state = playing_state()
    state.bricks.append(normal_brick())
    GameService(AlwaysBrickHit(), FixedScorer(50)).update(state, InputSnapshot(), 0.016)
    assert state.score == 50
    assert state.combo == 1
    assert state.bricks[0].is_destroyed()


def test_brick_hit_from_top_reflects_vertically():
    state = playing_state()
    state.bricks.append(normal_brick())
    GameService(AlwaysBrickHit(), FixedScorer(10)).update(state, InputSnapshot(), 0.016)
    assert state.ball.velocity == Velocity(0.0, 300.0)


def test_tough_brick_first_hit_awards_nothing():
    state = playing_state()
    state.bricks.append(Brick(Position(390.0, 295.0), Dimensions(60.0, 20.0), BrickKind.TOUGH))
    GameService(AlwaysBrickHit(), FixedScorer(25)).update(state, InputSnapshot(), 0.016)
    assert state.score == 0
    assert state.bricks[0].hits_remaining == 1
    assert state.status is GameStatus.PLAYING


def test_level_complete_when_all_bricks_gone():
    state = playing_state()
    state.bricks.append(normal_brick())
    GameService(AlwaysBrickHit(), FixedScorer(10)).update(state, InputSnapshot(), 0.016)
    assert state.status is GameStatus.LEVEL_COMPLETE


def test_quit_in_playing_state_causes_game_over():
    state = playing_state()
    svc_no_collision().update(state, InputSnapshot(quit=True), 0.016)
    assert state.status is GameStatus.GAME_OVER


def test_terminal_states_are_left_untouched():
    state = make_state()
    state.status = GameStatus.GAME_OVER
    svc_no_collision().update(state, InputSnapshot(launch=True, pause=True), 0.016)
    assert state.status is GameStatus.GAME_OVER


def test_centre_paddle_hit_bounces_straight_up_at_minimum_speed():
    state = playing_state()
    state.bricks.append(Brick(Position(0.0, 60.0), Dimensions(60.0, 20.0), BrickKind.NORMAL))
    state.ball = Ball(Position(400.0, 550.0), Velocity(0.0, 200.0), 8.0)
    GameService(CollisionService(), FixedScorer(0)).update(state, InputSnapshot(), 0.0)
    assert state.ball.velocity.vx == pytest.approx(0.0)
    assert state.ball.velocity.vy == pytest.approx(-320.0)


def test_edge_paddle_hit_bounces_at_steep_angle():
    state = playing_state()
    state.bricks.append(Brick(Position(0.0, 60.0), Dimensions(60.0, 20.0), BrickKind.NORMAL))
    state.ball = Ball(Position(450.0, 550.0), Velocity(0.0, 400.0), 8.0)
    GameService(CollisionService(), FixedScorer(0)).update(state, InputSnapshot(), 0.0)
    assert state.ball.velocity.vx > 0.0
    assert state.ball.velocity.vy < 0.0
    assert state.ball.velocity.speed() == pytest.approx(400.0)


def test_paddle_moves_while_waiting():
    state = make_state()
    svc_no_collision().update(state, InputSnapshot(move_left=True), 0.1)
    assert state.paddle.position.x == pytest.approx(360.0)
    assert state.ball.position.x == pytest.approx(360.0)