import json

from src.bedrock_chat.request_builder import build_inference_request

def test_prompt_wrapped_as_single_user_text_block(config):
    req = build_inference_request("Say hi", config)
    assert req.model_id == config.model_id
    assert req.messages == [{"role": "user", "content": [{"type": "text", "text": "Say hi"}]}]

def test_body_has_fixed_generation_parameters(config):
    payload = json.loads(build_inference_request("x", config).to_body())
    assert payload["anthropic_version"] == "bedrock-2023-05-31"
    assert payload["max_tokens"] == 200
    assert payload["temperature"] == 0.7

def test_body_matches_messages_wire_shape(config):
    body = build_inference_request("Say hi", config).to_body()
    assert '"messages":[{"role":"user","content":[{"type":"text","text":"Say hi"}]}]' in body

def test_identical_prompts_give_identical_bytes(config):
    a = build_inference_request("ünïcode \"quoted\"", config).to_body()
    b = build_inference_request("ünïcode \"quoted\"", config).to_body()
    assert a == b
    assert json.loads(a)["messages"][0]["content"][0]["text"] == "ünïcode \"quoted\""
