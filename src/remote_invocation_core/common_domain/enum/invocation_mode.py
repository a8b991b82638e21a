from enum import StrEnum


class InvocationMode(StrEnum):
    ACK_AND_RESULT = 'ack_and_result'
    ACK_ONLY = 'ack_only'
    RESULT_ONLY = 'result_only'
    FIRE_AND_FORGET = 'fire_and_forget'
