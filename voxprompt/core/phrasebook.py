"""
Localized text for deterministic prompt rendering.

Section headings and prose are kept here, keyed by a stable name, with one
entry per supported output language ('en' and European Portuguese 'pt').
"""

from typing import Dict, List

PHRASES: Dict[str, Dict[str, str]] = {
    # Section headings
    "goal": {"en": "Goal", "pt": "Objetivo"},
    "context": {"en": "Context", "pt": "Contexto"},
    "constraints": {"en": "Constraints", "pt": "Restrições"},
    "expected_output": {"en": "Expected Output", "pt": "Resultado Esperado"},
    "success_criteria": {"en": "Success Criteria", "pt": "Critérios de Sucesso"},
    "technical_context": {"en": "Technical Context", "pt": "Contexto Técnico"},
    "requirements": {"en": "Requirements & Constraints", "pt": "Requisitos e Restrições"},
    "io_spec": {"en": "Input/Output Specification", "pt": "Especificação de Entrada/Saída"},
    "code_style": {"en": "Code Style", "pt": "Estilo de Código"},
    "campaign_goal": {"en": "Campaign Goal", "pt": "Objetivo da Campanha"},
    "target_audience": {"en": "Target Audience", "pt": "Público-Alvo"},
    "brand_voice": {"en": "Brand Voice", "pt": "Voz da Marca"},
    "key_messages": {"en": "Key Messages", "pt": "Mensagens-Chave"},
    "format_constraints": {"en": "Format & Constraints", "pt": "Formato e Restrições"},
    "success_metrics": {"en": "Success Metrics", "pt": "Métricas de Sucesso"},
    "meeting_summary": {"en": "Meeting Summary", "pt": "Resumo da Reunião"},
    "key_decisions": {"en": "Key Decisions", "pt": "Decisões-Chave"},
    "action_items": {"en": "Action Items", "pt": "Ações a Realizar"},
    "follow_ups": {"en": "Follow-ups & Next Steps", "pt": "Acompanhamento e Próximos Passos"},
    "issue_description": {"en": "Issue Description", "pt": "Descrição do Problema"},
    "environment": {"en": "Environment", "pt": "Ambiente"},
    "steps_tried": {"en": "Steps Already Tried", "pt": "Passos Já Tentados"},
    "expected_actual": {"en": "Expected vs Actual Behaviour", "pt": "Comportamento Esperado vs Real"},
    "urgency": {"en": "Urgency & Impact", "pt": "Urgência e Impacto"},
    "desired_resolution": {"en": "Desired Resolution", "pt": "Resolução Pretendida"},
    "research_question": {"en": "Research Question", "pt": "Questão de Investigação"},
    "background": {"en": "Background", "pt": "Enquadramento"},
    "scope": {"en": "Scope & Boundaries", "pt": "Âmbito e Limites"},
    "methodology": {"en": "Methodology", "pt": "Metodologia"},
    "deliverables": {"en": "Expected Deliverables", "pt": "Entregáveis Esperados"},
    "timeline": {"en": "Timeline", "pt": "Calendário"},
    "clarifying_questions": {"en": "Clarifying Questions", "pt": "Perguntas de Esclarecimento"},
    # Goal section
    "summary_line": {
        "en": "**Template:** {template} | **Intent:** {intent} | **Output:** {output}",
        "pt": "**Modelo:** {template} | **Intenção:** {intent} | **Resultado:** {output}",
    },
    "request_intro": {"en": "Request (as dictated):", "pt": "Pedido (tal como foi ditado):"},
    "request_intro_direct": {
        "en": "Your task: handle the request below directly and completely.",
        "pt": "A tua tarefa: trata do pedido abaixo de forma direta e completa.",
    },
    "transcript_note": {
        "en": "The request comes from a voice transcript, so it may contain filler words, repetitions or self-corrections. Read all of it before starting and follow the latest correction.",
        "pt": "O pedido vem de uma transcrição de voz, por isso pode conter palavras de preenchimento, repetições ou correções. Lê tudo antes de começar e segue a correção mais recente.",
    },
    # Shared context lines
    "domain_line": {"en": "Domain: {topics}", "pt": "Domínio: {topics}"},
    "no_domain": {
        "en": "No specific domain was detected; treat this as a general request.",
        "pt": "Não foi detetado um domínio específico; trata isto como um pedido geral.",
    },
    "names_line": {"en": "Names and terms mentioned: {entities}", "pt": "Nomes e termos mencionados: {entities}"},
    "context_detail": {
        "en": "Use this context to choose terminology and examples that fit the domain.",
        "pt": "Usa este contexto para escolher terminologia e exemplos adequados ao domínio.",
    },
    "constraints_intro": {"en": "Stated constraints:", "pt": "Restrições indicadas:"},
    "constraints_detail": {
        "en": "Respect every constraint above. If two of them conflict, point it out before proceeding.",
        "pt": "Respeita todas as restrições acima. Se duas entrarem em conflito, assinala-o antes de avançar.",
    },
    "requirements_default": {
        "en": "No explicit requirements were stated. Keep the solution minimal and list the assumptions you make.",
        "pt": "Não foram indicados requisitos explícitos. Mantém a solução mínima e enumera os pressupostos que assumires.",
    },
    "output_structure": {
        "en": "Structure the answer with headings or lists where it helps readability.",
        "pt": "Estrutura a resposta com títulos ou listas sempre que isso ajude a leitura.",
    },
    "output_detail": {
        "en": "Where useful, include a short example and note any edge cases.",
        "pt": "Quando for útil, inclui um exemplo curto e assinala casos-limite.",
    },
    # Coding
    "tech_names": {"en": "Technologies and names mentioned: {entities}", "pt": "Tecnologias e nomes mencionados: {entities}"},
    "tech_default": {
        "en": "No specific language or framework was named; pick sensible defaults and state them.",
        "pt": "Não foi indicada nenhuma linguagem ou framework; escolhe opções sensatas e indica-as.",
    },
    "tech_detail": {
        "en": "Assume the code will run in a production codebase unless the request says otherwise.",
        "pt": "Assume que o código vai correr numa base de código em produção, salvo indicação em contrário.",
    },
    "io_body": {
        "en": "Describe the expected inputs and outputs, including types and edge cases such as empty or invalid input.",
        "pt": "Descreve as entradas e saídas esperadas, incluindo tipos e casos-limite como entradas vazias ou inválidas.",
    },
    "io_detail": {
        "en": "Include at least one example call with its expected result.",
        "pt": "Inclui pelo menos um exemplo de chamada com o resultado esperado.",
    },
    "style_idioms": {"en": "Follow the idioms of the chosen language", "pt": "Segue as convenções da linguagem escolhida"},
    "style_names": {"en": "Use clear names and keep functions small", "pt": "Usa nomes claros e mantém as funções pequenas"},
    "style_comments": {
        "en": "Comment only where the intent is not obvious",
        "pt": "Comenta apenas onde a intenção não é óbvia",
    },
    "style_tests": {
        "en": "Include tests for the main path and the edge cases",
        "pt": "Inclui testes para o caminho principal e para os casos-limite",
    },
    # Marketing
    "audience_body": {
        "en": "Identify the primary audience and tailor tone, benefits and examples to them.",
        "pt": "Identifica o público principal e adapta o tom, os benefícios e os exemplos a esse público.",
    },
    "audience_names": {"en": "Names that may define the audience or brand: {entities}", "pt": "Nomes que podem definir o público ou a marca: {entities}"},
    "audience_detail": {
        "en": "Describe one concrete persona before writing the copy.",
        "pt": "Descreve uma persona concreta antes de escrever o texto.",
    },
    "voice_body": {
        "en": "Keep the voice clear and consistent with the brand; avoid jargon unless the audience expects it.",
        "pt": "Mantém uma voz clara e coerente com a marca; evita jargão a menos que o público o espere.",
    },
    "voice_detail": {
        "en": "Give two short sample lines that show the voice before the full copy.",
        "pt": "Dá duas frases curtas de exemplo que mostrem a voz antes do texto completo.",
    },
    "messages_body": {
        "en": "Lead with the main benefit stated in the request.",
        "pt": "Começa pelo principal benefício referido no pedido.",
    },
    "messages_detail": {
        "en": "Keep to three key messages at most and order them by importance.",
        "pt": "Limita-te a três mensagens-chave no máximo, ordenadas por importância.",
    },
    "format_line": {"en": "Format: {guidance}", "pt": "Formato: {guidance}"},
    # Meeting
    "decisions_body": {
        "en": "List every decision made in the meeting, one per line, with who made it when known.",
        "pt": "Lista todas as decisões tomadas na reunião, uma por linha, com quem as tomou quando se souber.",
    },
    "decisions_detail": {
        "en": "Flag decisions that sound tentative so they can be confirmed.",
        "pt": "Assinala as decisões que pareçam provisórias para que possam ser confirmadas.",
    },
    "actions_body": {
        "en": "Turn each commitment into an action item with an owner and a due date.",
        "pt": "Transforma cada compromisso numa ação com responsável e prazo.",
    },
    "actions_people": {"en": "People or teams mentioned: {entities}", "pt": "Pessoas ou equipas mencionadas: {entities}"},
    "actions_deadlines": {"en": "Deadlines and constraints mentioned:", "pt": "Prazos e restrições mencionados:"},
    "actions_detail": {
        "en": "Present the action items as a table with columns for task, owner and due date.",
        "pt": "Apresenta as ações numa tabela com colunas para tarefa, responsável e prazo.",
    },
    "follow_body": {
        "en": "Note open questions that need a follow-up and propose the next checkpoint.",
        "pt": "Regista as questões em aberto que precisam de acompanhamento e propõe o próximo ponto de situação.",
    },
    "follow_detail": {
        "en": "Suggest who should receive the summary once it is ready.",
        "pt": "Sugere quem deve receber o resumo quando estiver pronto.",
    },
    # Support
    "environment_names": {"en": "Systems and components mentioned: {entities}", "pt": "Sistemas e componentes mencionados: {entities}"},
    "environment_default": {
        "en": "The environment was not described; ask for versions and recent changes if they matter.",
        "pt": "O ambiente não foi descrito; pede versões e alterações recentes se forem relevantes.",
    },
    "tried_body": {
        "en": "Take into account anything already tried and do not repeat it as a first suggestion.",
        "pt": "Tem em conta o que já foi tentado e não o repitas como primeira sugestão.",
    },
    "behaviour_body": {
        "en": "State the expected behaviour, the actual behaviour and where they diverge.",
        "pt": "Indica o comportamento esperado, o comportamento real e onde divergem.",
    },
    "urgency_body": {
        "en": "Assess how severe the issue is and who is affected before proposing changes.",
        "pt": "Avalia a gravidade do problema e quem é afetado antes de propor alterações.",
    },
    "resolution_body": {
        "en": "Provide a step-by-step diagnosis followed by a concrete fix or workaround.",
        "pt": "Apresenta um diagnóstico passo a passo seguido de uma correção concreta ou alternativa.",
    },
    "resolution_constraints": {"en": "Constraints on the resolution:", "pt": "Restrições à resolução:"},
    "resolution_detail": {
        "en": "Explain how to verify the fix and how to prevent the issue from coming back.",
        "pt": "Explica como verificar a correção e como evitar que o problema volte a acontecer.",
    },
    # Research
    "background_default": {
        "en": "Summarise what is already known about the subject before going deeper.",
        "pt": "Resume o que já se sabe sobre o tema antes de aprofundar.",
    },
    "scope_focus": {"en": "Focus on: {topics}", "pt": "Foco em: {topics}"},
    "scope_default": {
        "en": "Define what is in and out of scope before starting.",
        "pt": "Define o que está dentro e fora do âmbito antes de começar.",
    },
    "method_body": {
        "en": "Explain how sources will be found and evaluated; prefer recent, reputable sources and cite them.",
        "pt": "Explica como as fontes serão encontradas e avaliadas; prefere fontes recentes e credíveis e cita-as.",
    },
    "method_detail": {
        "en": "Point out where the evidence is weak or contradictory.",
        "pt": "Assinala onde as evidências são fracas ou contraditórias.",
    },
    "deliverables_summary": {
        "en": "Open with a short summary of the findings.",
        "pt": "Começa com um breve resumo das conclusões.",
    },
    "timeline_deadlines": {"en": "Deadlines mentioned:", "pt": "Prazos mencionados:"},
    "timeline_default": {
        "en": "No deadline was stated; propose a realistic timeline.",
        "pt": "Não foi indicado nenhum prazo; propõe um calendário realista.",
    },
    # Clarifying questions
    "questions_intro": {
        "en": "The request is ambiguous. Ask these questions before answering, or state the assumptions you make:",
        "pt": "O pedido é ambíguo. Faz estas perguntas antes de responder, ou indica os pressupostos que assumes:",
    },
    "q_goal": {"en": "What exactly should be produced or done?", "pt": "O que deve ser produzido ou feito, exatamente?"},
    "q_format": {
        "en": "What format should the final output take (for example code, a list, a document or an email)?",
        "pt": "Que formato deve ter o resultado final (por exemplo código, uma lista, um documento ou um email)?",
    },
    "q_constraints": {
        "en": "Are there constraints such as length, deadline, tools or things to avoid?",
        "pt": "Há restrições como extensão, prazo, ferramentas ou coisas a evitar?",
    },
    "q_domain": {"en": "What domain or context does this request belong to?", "pt": "A que domínio ou contexto pertence este pedido?"},
    "q_entities": {
        "en": "Which specific products, people or technologies are involved?",
        "pt": "Que produtos, pessoas ou tecnologias concretas estão envolvidos?",
    },
    "q_audience": {"en": "Who is the intended audience for the result?", "pt": "Quem é o público-alvo do resultado?"},
    "q_scope": {"en": "What is in scope and what should be left out?", "pt": "O que está dentro do âmbito e o que deve ficar de fora?"},
    # Model-specific closings
    "closing_claude": {
        "en": "Work inside the structure above and ask before assuming anything that is not stated.",
        "pt": "Trabalha dentro da estrutura acima e pergunta antes de assumir algo que não esteja indicado.",
    },
    "closing_chatgpt": {
        "en": "Follow the sections in order and answer directly.",
        "pt": "Segue as secções por ordem e responde de forma direta.",
    },
}

INTENT_LABELS: Dict[str, Dict[str, str]] = {
    "en": {
        "create": "create", "analyze": "analyze", "fix": "fix", "explain": "explain", "optimize": "optimize",
        "convert": "convert", "plan": "plan", "research": "research", "general": "general",
    },
    "pt": {
        "create": "criar", "analyze": "analisar", "fix": "corrigir", "explain": "explicar", "optimize": "otimizar",
        "convert": "converter", "plan": "planear", "research": "investigar", "general": "geral",
    },
}

OUTPUT_LABELS: Dict[str, Dict[str, str]] = {
    "en": {
        "code": "code", "list": "list", "document": "document", "email": "email", "analysis": "analysis",
        "plan": "plan", "presentation": "presentation", "response": "response",
    },
    "pt": {
        "code": "código", "list": "lista", "document": "documento", "email": "email", "analysis": "análise",
        "plan": "plano", "presentation": "apresentação", "response": "resposta",
    },
}

TOPIC_LABELS: Dict[str, Dict[str, str]] = {
    "en": {
        "technology": "technology", "business": "business", "marketing": "marketing",
        "support": "support", "research": "research", "meeting": "meeting",
    },
    "pt": {
        "technology": "tecnologia", "business": "negócio", "marketing": "marketing",
        "support": "suporte", "research": "investigação", "meeting": "reunião",
    },
}

OUTPUT_GUIDANCE: Dict[str, Dict[str, str]] = {
    "en": {
        "code": "Working, well-structured code with a brief explanation.",
        "list": "A clear, prioritised list with one item per line.",
        "document": "A well-organised document with headings and short paragraphs.",
        "email": "A ready-to-send email with subject line, greeting and sign-off.",
        "analysis": "An analysis with findings, supporting evidence and recommendations.",
        "plan": "A step-by-step plan with milestones and owners where relevant.",
        "presentation": "A slide-by-slide outline with a title and key points per slide.",
        "response": "A direct, complete answer to the request.",
    },
    "pt": {
        "code": "Código funcional e bem estruturado, com uma breve explicação.",
        "list": "Uma lista clara e priorizada, com um item por linha.",
        "document": "Um documento bem organizado, com títulos e parágrafos curtos.",
        "email": "Um email pronto a enviar, com assunto, saudação e despedida.",
        "analysis": "Uma análise com conclusões, evidências e recomendações.",
        "plan": "Um plano passo a passo com marcos e responsáveis quando relevante.",
        "presentation": "Um esboço diapositivo a diapositivo, com título e pontos-chave em cada um.",
        "response": "Uma resposta direta e completa ao pedido.",
    },
}

SUCCESS_CRITERIA: Dict[str, Dict[str, List[str]]] = {
    "general": {
        "en": [
            "The response fully addresses the request",
            "Every stated constraint is respected",
            "The output matches the expected format",
            "Assumptions are stated explicitly",
        ],
        "pt": [
            "A resposta cobre o pedido por completo",
            "Todas as restrições indicadas são respeitadas",
            "O resultado tem o formato esperado",
            "Os pressupostos são indicados de forma explícita",
        ],
    },
    "coding": {
        "en": [
            "The code runs without errors",
            "All requirements and constraints are met",
            "Edge cases are handled explicitly",
            "The solution is briefly explained",
        ],
        "pt": [
            "O código corre sem erros",
            "Todos os requisitos e restrições são cumpridos",
            "Os casos-limite são tratados de forma explícita",
            "A solução é explicada de forma breve",
        ],
    },
    "marketing": {
        "en": [
            "The copy ends with a clear call to action",
            "The message fits the target audience",
            "The copy respects every format constraint",
            "Engagement or conversion can be measured",
        ],
        "pt": [
            "O texto termina com um apelo à ação claro",
            "A mensagem é adequada ao público-alvo",
            "O texto respeita todas as restrições de formato",
            "O envolvimento ou a conversão podem ser medidos",
        ],
    },
    "meeting": {
        "en": [
            "Every action item has an owner and a due date",
            "Decisions are separated from open questions",
            "Nothing is added that was not discussed",
        ],
        "pt": [
            "Cada ação tem responsável e prazo",
            "As decisões estão separadas das questões em aberto",
            "Nada é acrescentado que não tenha sido discutido",
        ],
    },
    "support": {
        "en": [
            "The root cause is identified or narrowed down",
            "The fix or workaround can be applied step by step",
            "The user knows how to confirm the issue is resolved",
        ],
        "pt": [
            "A causa raiz é identificada ou delimitada",
            "A correção ou alternativa pode ser aplicada passo a passo",
            "O utilizador sabe como confirmar que o problema foi resolvido",
        ],
    },
    "research": {
        "en": [
            "The research question is answered directly",
            "Claims are backed by cited sources",
            "Limitations and open questions are stated",
        ],
        "pt": [
            "A questão de investigação tem resposta direta",
            "As afirmações são suportadas por fontes citadas",
            "As limitações e questões em aberto são indicadas",
        ],
    },
}


def phrase(key: str, lang: str, **fields: str) -> str:
    """
    Look up a localized phrase and fill its placeholders.

    Raises:
        KeyError: If the key or language is unknown
    """
    text = PHRASES[key][lang]
    return text.format(**fields) if fields else text
