"""
CLI interface for the gradient descent playground.
"""

import sys
import argparse
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from tqdm import tqdm

from config import SAMPLE_CSV, ModelType, TrainingConfig
from formatter import render_summary
from loss import EmptyDatasetError
from pipeline import InvalidInputError, run_playground


def _train_parser() -> argparse.ArgumentParser:
    defaults = TrainingConfig()
    parser = argparse.ArgumentParser(prog="cli.py train")
    parser.add_argument("file", help="CSV file with x,y per line ('-' for stdin)")
    parser.add_argument("--model", default=ModelType.INTERCEPT.value,
                        choices=[m.value for m in ModelType])
    parser.add_argument("--lr", default=str(defaults.learning_rate))
    parser.add_argument("--epochs", default=str(defaults.epochs))
    parser.add_argument("--format", default="text", choices=["text", "table", "summary"])
    parser.add_argument("--output", default=None, help="Write output here instead of stdout")
    return parser


class CLInterface:
    def run_command(self, command: str, args: list) -> int:
        if command == "train": return self.cmd_train(args)
        elif command == "sample": return self.cmd_sample()
        else:
            print("Commands: train, sample")
            return 1

    def cmd_train(self, args) -> int:
        opts = _train_parser().parse_args(args)

        if opts.file == "-":
            text = sys.stdin.read()
        else:
            try:
                with open(opts.file, 'r', encoding='utf-8') as f: text = f.read()
            except OSError as e:
                print(f"Error reading {opts.file}: {e}")
                return 1

        pbar = tqdm(total=None, desc="Training", file=sys.stderr, leave=False)

        def on_epoch(epoch, total, loss):
            if pbar.total != total: pbar.reset(total=total)
            pbar.set_postfix(mse=f"{loss:.4f}")
            pbar.update(1)

        try:
            output = run_playground(opts.model, opts.lr, opts.epochs, text, progress_callback=on_epoch)
        except (InvalidInputError, EmptyDatasetError) as e:
            print(f"Error: {e}")
            return 1
        finally:
            pbar.close()

        if opts.format == "table": rendered = output.table_html
        elif opts.format == "summary": rendered = render_summary(output.result)
        else: rendered = output.text

        if opts.output:
            with open(opts.output, 'w', encoding='utf-8') as f: f.write(rendered + "\n")
            print(f"Wrote {len(output.result.trajectory)} epochs to {opts.output}")
        else:
            print(rendered)
        return 0

    def cmd_sample(self) -> int:
        print(SAMPLE_CSV)
        return 0


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    cli = CLInterface()
    if not argv:
        print("Usage: python cli/cli.py train <file.csv> [--model y=b|y=a*x] [--lr F] [--epochs N]")
        return 1
    return cli.run_command(argv[0], argv[1:])

if __name__ == "__main__":
    sys.exit(main())
