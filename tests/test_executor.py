import pytest

from brainrunner.errors import (BracketMismatchError, CursorUnderflowError, EndOfInputError,
                                MismatchKind)
from brainrunner.executor import Executor
from brainrunner.ports import BufferedInput, BufferedOutput

HELLO_WORLD = (
    "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]"
    ">>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
)


def make(source="", data=""):
    out = BufferedOutput()
    executor = Executor(BufferedInput(data), out)
    executor.set_instructions(source)
    return executor, out


def assert_initial(executor):
    assert executor.tape.cells == (0,)
    assert executor.tape.cursor == 0
    assert executor.instruction_pointer == 0
    assert executor.loop_stack == []
    assert len(executor.program) == 0


def test_output_of_two_increments():
    executor, out = make("++.")
    executor.run()
    assert out.values == [2]


def test_loop_runs_once_and_clears_cell():
    executor, _ = make("+[-]")
    executor.run()
    assert executor.tape.cells == (0,)
    assert executor.halted
    assert executor.loop_stack == []


def test_loop_skipped_when_cell_is_zero():
    executor, out = make("[+.]+.")
    executor.run()
    assert out.values == [1]


def test_nested_loop_skip():
    executor, out = make("[[+][.]]++.")
    executor.run()
    assert out.values == [2]


def test_multiplication_loop():
    executor, _ = make("+++[>++<-]>")
    executor.run()
    assert executor.tape.cells == (0, 6)
    assert executor.tape.cursor == 1


def test_hello_world():
    executor, out = make(HELLO_WORLD)
    executor.run()
    assert out.text == "Hello World!\n"


def test_comments_are_inert():
    executor, out = make("this + is + fine .")
    executor.run()
    assert out.values == [2]


def test_input_stores_character_code():
    executor, out = make(",+.", data="A")
    executor.run()
    assert executor.tape.read() == ord("B")
    assert out.text == "B"


def test_cells_do_not_wrap():
    executor, out = make("-.")
    executor.run()
    assert executor.tape.read() == -1
    assert out.values == [-1]
    assert out.text == chr(255)


def test_cursor_underflow_resets_everything():
    executor, _ = make("<")
    with pytest.raises(CursorUnderflowError) as err:
        executor.run()
    assert err.value.instruction == 0
    assert str(err.value) == "cell pointer out of bounds. (instruction 1)"
    assert_initial(executor)


def test_cursor_underflow_after_work_reports_index():
    executor, _ = make("+>+<<")
    with pytest.raises(CursorUnderflowError) as err:
        executor.run()
    assert err.value.instruction == 4
    assert_initial(executor)


def test_bracket_mismatch_resets_and_does_not_run():
    executor, out = make("+.]")
    with pytest.raises(BracketMismatchError) as err:
        executor.run()
    assert err.value.kind is MismatchKind.UNMATCHED_CLOSE
    assert out.values == []
    assert_initial(executor)


def test_end_of_input_is_fatal():
    executor, _ = make("+,")
    with pytest.raises(EndOfInputError) as err:
        executor.run()
    assert err.value.instruction == 1
    assert_initial(executor)


def test_eof_value_is_stored():
    out = BufferedOutput()
    executor = Executor(BufferedInput("", eof_value=0), out)
    executor.set_instructions("+,.")
    executor.run()
    assert out.values == [0]


def test_reset_is_idempotent():
    executor, _ = make("+>++")
    executor.run()
    executor.reset()
    once = (executor.tape.cells, executor.tape.cursor, executor.instruction_pointer,
            executor.loop_stack, executor.program.source)
    executor.reset()
    twice = (executor.tape.cells, executor.tape.cursor, executor.instruction_pointer,
             executor.loop_stack, executor.program.source)
    assert once == twice == ((0,), 0, 0, [], "")


def test_run_again_starts_over():
    executor, out = make("+.")
    executor.run()
    executor.run()
    assert out.values == [1, 1]


def test_step_dispatches_one_symbol():
    executor, _ = make("++")
    assert executor.step() is True
    assert executor.tape.read() == 1
    assert executor.step() is False
    assert executor.step() is False
    assert executor.tape.read() == 2


def test_close_bracket_returns_to_open():
    executor, _ = make("+[-]")
    executor.prepare()
    executor.step()  # +
    executor.step()  # [
    assert executor.loop_stack == [1]
    executor.step()  # -
    executor.step()  # ]
    assert executor.instruction_pointer == 1
    assert executor.loop_stack == []


def test_step_limit_stops_and_resumes():
    executor, _ = make("+[]")
    steps = executor.run(max_steps=10)
    assert steps == 10
    assert executor.hit_step_limit
    assert not executor.halted
    assert executor.tape.read() == 1


def test_step_limit_resume_finishes():
    executor, out = make("+++[-]++.")
    executor.run(max_steps=3)
    assert executor.tape.read() == 3
    executor.run(reset_first=False)
    assert not executor.hit_step_limit
    assert out.values == [2]


def test_show():
    executor, _ = make(">+++")
    executor.run()
    assert executor.show() == "Cell #: 1; Cell value: 3;"


def test_separate_executors_do_not_share_state():
    first, _ = make("+++")
    second, _ = make("+")
    first.run()
    second.run()
    assert first.tape.read() == 3
    assert second.tape.read() == 1


def test_step_validates_before_dispatching():
    executor, _ = make("+]")
    with pytest.raises(BracketMismatchError) as err:
        executor.step()
    assert err.value.kind is MismatchKind.UNMATCHED_CLOSE
    assert err.value.position == 1
    assert_initial(executor)


def test_step_on_unclosed_loop_is_a_mismatch():
    executor, _ = make("[")
    with pytest.raises(BracketMismatchError) as err:
        executor.step()
    assert err.value.kind is MismatchKind.UNMATCHED_OPEN
    assert_initial(executor)


def test_step_revalidates_after_append():
    executor, _ = make("+")
    executor.step()
    assert executor.tape.read() == 1
    executor.add_instructions("]")
    with pytest.raises(BracketMismatchError):
        executor.step()
    assert_initial(executor)
