"""Quickstart example for stepflow."""
from stepflow import SAMPLE_DESCRIPTION, MaxFlowStepper, parse, partition_layers


def main() -> None:
    network = parse(SAMPLE_DESCRIPTION)
    print("layers:", partition_layers(network.view(), 0))

    stepper = MaxFlowStepper(network, 0, 7)
    while not stepper.is_finished():
        step = stepper.step()
        print("path:", step.path, "bottleneck:", step.bottleneck, "flow:", step.cumulative_flow)
    print("maximum flow:", stepper.cumulative_flow)


if __name__ == "__main__":
    main()
