#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Guess-the-number demo for the casual input helpers.

import random
import sys

import casual
from casual.errors import ConsoleIOError
from core.config_loader import load_env


def play():
    num = random.randint(0, 255)
    print("Try guess the number I am thinking of 😃 ...")
    print("  (hint: it's between 0 and 255)\n")

    while True:
        guess = casual.prompt("Enter your guess: ", int).get()

        if guess < num:
            print("Too low!")
        elif guess > num:
            print("Too high!")
        else:
            print("You got it!")
            print(f"The number was: {num}\n")

            if casual.confirm("Do you want to play again?"):
                num = random.randint(0, 255)
            else:
                break


def main():
    # .env is an application concern, load it before the first prompt
    load_env()
    try:
        play()
    except (ConsoleIOError, KeyboardInterrupt):
        print("\nGoodbye!")
        sys.exit(1)


if __name__ == "__main__":
    main()
