from fasthtml.common import *

QUESTION = "Create a simple class that demonstrates encapsulation by using private and public properties and methods."


class BankAccount:
    def __init__(self, account_number, initial_balance):
        self.__account_number = account_number
        self.__balance = initial_balance

    def deposit(self, amount):
        if amount > 0:
            self.__balance += amount
            return f"Deposited: {amount}. New Balance: {self.__balance}"
        return "Invalid deposit amount."

    def withdraw(self, amount):
        if 0 < amount <= self.__balance:
            self.__balance -= amount
            return f"Withdrawn: {amount}. Remaining Balance: {self.__balance}"
        return "Invalid withdrawal amount or insufficient balance."

    def get_balance(self):
        return self.__balance


def render():
    yield H4(QUESTION)

    account = BankAccount("123456789", 1000)
    yield P(f"New Account created with Initial Balance: {account.get_balance()}")
    yield P(account.deposit(500))
    yield P(account.withdraw(200))
    yield P(f"Final Balance: {account.get_balance()}")
