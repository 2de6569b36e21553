"""Minimal runner for flow processes.

Usage:
    python run_flow.py --flow Create_Case --input AccountId=001xx --required CaseId
    python run_flow.py --config-record Case_Intake --inputs-json '{"Priority": 2}' --returning CaseId --json

Backends come from the environment (see flowproc.config.settings).
"""
import argparse
import json
import sys

from flowproc import FlowProcessError, create_flow_process


def _parse_value(raw: str):
	try:
		return json.loads(raw)
	except ValueError:
		return raw


def _parse_input(item: str):
	if '=' not in item:
		raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got '{item}'")
	name, raw = item.split('=', 1)
	return name.strip(), _parse_value(raw)


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(description='Run a flow and print its outputs')
	group = parser.add_mutually_exclusive_group(required=True)
	group.add_argument('--flow', help='Flow API name to run')
	group.add_argument('--config-record', help='Name of the configuration record holding the flow name')
	parser.add_argument('--table', help='Configuration table (with --config-record)')
	parser.add_argument('--field', help='Field holding the flow name (with --config-record)')
	parser.add_argument('--input', action='append', default=[], type=_parse_input, metavar='NAME=VALUE',
		help='Input variable; VALUE is decoded as JSON when possible (repeatable)')
	parser.add_argument('--inputs-json', help='JSON object of input variables')
	parser.add_argument('--output', action='append', default=[], help='Optional output variable (repeatable)')
	parser.add_argument('--required', action='append', default=[], help='Required output variable (repeatable)')
	parser.add_argument('--returning', help='Print only this required output')
	parser.add_argument('--json', action='store_true', help='Emit raw JSON output')
	return parser


def main(argv=None, process=None) -> int:
	parser = build_parser()
	args = parser.parse_args(argv)
	if args.flow and (args.table or args.field):
		parser.error("--table/--field only apply with --config-record")
	try:
		# Missing backend credentials surface as RuntimeError from the factory.
		process = process or create_flow_process()
		if args.flow:
			process.named(args.flow)
		else:
			process.from_config(args.config_record, table=args.table, field=args.field)
		if args.inputs_json:
			inputs = json.loads(args.inputs_json)
			if not isinstance(inputs, dict):
				raise FlowProcessError('--inputs-json must be a JSON object')
			process.with_inputs(inputs)
		process.with_inputs(dict(args.input))
		process.outputs(*args.output)
		for name in args.required:
			process.required(name)

		if args.returning:
			res = process.returning(args.returning)
		else:
			res = process.run()
	except (FlowProcessError, RuntimeError, json.JSONDecodeError) as e:
		print(f"error: {e}", file=sys.stderr)
		return 1

	if args.json:
		print(json.dumps(res, default=str, ensure_ascii=False, indent=2))
	elif isinstance(res, dict):
		for name, value in res.items():
			print(f"{name}: {value}")
	else:
		print(res)
	return 0


if __name__ == '__main__':
	sys.exit(main())
