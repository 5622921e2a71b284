# oddments

A collection of small, self-contained command-line tools. They use only
the Python standard library, and the `mastermind` game needs `curses`,
so a POSIX system is assumed.

Install it with:

    pip install .

To run the tests:

    pip install .[test]
    pytest

## The tools

### triangle

This tool asks for what you know about a triangle. That covers the sides
`a`, `b` and `c`, the angles `A`, `B` and `C` in degrees, and the area when
it is needed. Enter `0` for a value you do not know. The tool then prints
every side and angle and the area, to nine decimals.

    triangle

It stops with a message and a non-zero exit status in these cases:

* the input is not a number (status 1);
* a value is negative or otherwise out of range (status 2);
* the angles add up to more than 180 degrees (status 3);
* the sides cannot form a triangle (statuses 4, 7 and 9);
* too little is known (status 8).

When two triangles fit the data, it prints both as "Solution nr. 1" and "Solution nr. 2".

The same solving is available from Python in `oddments.triangle`:

* `from_three_sides(a, b, c)` returns a `Triangle`.
* `from_two_sides(a, b, c, A, B, C)` returns a list of one or two `Triangle` objects.
* `from_one_side(which, side, A, B, C)` takes `which` as a `Side`.
* `format_solution(triangle, number)` renders a `Triangle` as text.
* `deg2rad` and `rad2deg` convert between degrees and radians.

Angles in a `Triangle` are in radians, and `Triangle.area` gives the area. Impossible input raises `TriangleError`.

### triangle-legacy

This is the earlier triangle solver. It has its own prompts and prints
with a "Sides / Angles" layout. It can run in four ways:

* with no arguments, it asks once, interactively;
* with seven arguments `a b c A B C area`, it takes the values from the command line;
* with `--repeat`, it asks again after each triangle until you choose to exit;
* with `--version` or `--help`, it prints a short notice.

    triangle-legacy
    triangle-legacy 3 4 0 0 0 90 0
    triangle-legacy --repeat

In `--repeat` mode, three given angles are checked against 180 as a
number of radians, so a triangle given by three angles is always refused.

The functions are available in `oddments.triangle_legacy`:

* `solve_three_sides`
* `solve_two_sides`, which returns a list of `Solution` objects
* `solve_one_side`
* `complete_with_area`, which uses the area to fill in one more side or angle
* `format_solution`

Impossible input raises `ImpossibleTriangleError`. Missing data raises `NotEnoughInformationError`.

### sudoku

Reads a 9×9 sudoku from standard input, taking the first 81 digits.
`0` marks an empty cell and everything else is ignored. It prints every
solution found by brute-force backtracking, then `Solutions: N`.

    sudoku < puzzle.txt

From Python, use `oddments.sudoku`:

* `read_board(text)` reads a board.
* `solve(board)` yields every completed board and leaves the input alone.
* `is_promising(board, x, y)` checks the row, column and box through a cell.
* `format_board(board)` renders a board as text.

### prime and lprime

These print prime numbers between two non-negative bounds, one per line,
by testing numbers of the form 6k ± 1.

    prime 1 100
    lprime 1000000 1001000

* `prime` lists the primes from the start up to and including the stop.
* `lprime` steps by six from the start while below the stop, so its last value may pass the stop by one.

In Python, these are `oddments.primes.primes_between` and `primes_between_long`, both generators.

`is_prime` only tries divisors while their 6k base squared stays below the number. Because of that, a few small values such as 1 and 25 pass as prime.

### tonum

Draws numbers as large seven-segment digits, nine lines tall. Give the
numbers as arguments, or pipe words in on standard input. A character
that is not a digit is drawn as 8.

    tonum 2024
    echo 0123456789 | tonum

`oddments.digits.render(text)` returns the drawing as a string.

### padcrypt

XOR-encrypts a file with a key file, used as a one-time pad. An encrypted
file starts with a 50-byte header holding the original file name, which is
also encrypted. Because of that header, the key must be at least 50 bytes
longer than the file when you encrypt.

    padcrypt keyfile secret.txt encrypt    # asks for the output file name
    padcrypt keyfile secret.enc            # shows the stored name, asks y/n, writes to that name

Exit statuses:

| Status | Meaning |
|---|---|
| 1 | Wrong number of arguments |
| 5 | The third argument is not `encrypt` |
| 2 | A file cannot be read |
| 3 or 6 | The key is too short |
| 4 | The stored name was refused |
| 7 | The encrypted file is shorter than its header |

Destroy the key file afterwards.

The Python functions are in `oddments.padcrypt`:

* `encrypt_file`
* `decrypt_file`
* `read_stored_name`
* `xor_bytes`

Failures raise `CryptError`, which carries a `status`.

### dumbsort

Reads a count followed by that many integers from standard input. It
sorts them by shuffling until they happen to be in order. Negative numbers
are refused. Keep the list short.

    echo "5 3 1 4 1 5" | dumbsort

### memhog

Allocates the given number of megabytes, writes to every byte, and holds the memory until you press Enter.

    memhog 512

### logbench-fwrite and logbench-mmap

These are two ways of writing zero-filled log records to `test.log` in the
current directory, so you can compare their throughput. An optional
argument sets the record size; the default is 100 bytes.

    logbench-fwrite 4096
    logbench-mmap 4096

* `logbench-fwrite` keeps appending until it is interrupted.
* `logbench-mmap` sizes `test.log` to 100 GB, which is sparse on most file systems, and fills it through a memory map.

Run them only where that is acceptable.

For bounded runs from Python, use `oddments.logbench.append_records(path, record_size, count)` and `fill_mapped(path, record_size, size)`.

### procrestart

This is a demonstration of a restarter with a watchdog.

* The worker sleeps for 10 seconds.
* The 2-second watchdog stops it first.
* The restarter reports how the run ended, then starts it again.

The demonstration runs until you interrupt it.

From Python, `oddments.procrestart` provides:

* `respawn_on_crash(crash)`, which wraps a task so that it is restarted after each failure;
* `watchdog(timeout)`;
* `describe_status` and `is_error`, which interpret wait statuses.

### mastermind

Mastermind in the terminal. You choose whether colours may repeat and how
many tries you want. Then you place colours 1–8 in the four places and
confirm each guess. The terminal needs at least 22 rows, and enough
columns for the number of tries.

    mastermind

The game rules are usable without a screen:

* `oddments.mastermind.Mastermind` holds the state of one game.
* `make_secret` picks the secret colours.
* `score_guess(secret, guess)` returns (right place, wrong place) counts.

## What it does not do

* `sudoku` solves only 9×9 boards, by plain backtracking; other board sizes are not supported.
* `procrestart` runs its worker inside the same process. It does not fork a separate child process, so a real memory fault in the worker is not survived.
* `mastermind` has only the curses interface; there is no plain-text mode.