"""
# Snippet-Generator: registry.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

The built-in handler table: one declarative specification per catalog keyword that has a tailored snippet.

Catalog keywords absent from the table (e.g. `break`, `namespace`, `virtual`)
are served by the generic fallback in `dispatch.py`.
"""

from typing import Optional

from snippetgen.handlers import (
    DEFAULT_VARIANT,
    Declaration,
    HandlerSpecification,
    Prompt,
    Value,
    select_answer,
)
from snippetgen.utilities import split_csv

FUNDAMENTAL_TYPE_DEFAULT_VALUES = {
    'int': '0',
    'double': '3.14',
    'float': '2.5f',
    'char': "'a'",
    'long': '123456789L',
    'short': '42',
    'signed': '0',
    'unsigned': '0',
    'bool': 'true',
    'wchar_t': "L'a'",
    'char16_t': "u'a'",
    'char32_t': "U'a'",
}
CAST_KEYWORDS = ('static_cast', 'dynamic_cast', 'const_cast', 'reinterpret_cast')
BOOLEAN_ALTERNATIVE_TOKENS = ('and', 'or', 'not')
OTHER_ALTERNATIVE_TOKENS = ('xor', 'bitand', 'bitor', 'compl', 'not_eq', 'and_eq', 'or_eq', 'xor_eq')

DEFAULT_MEMBER_TYPE = 'int'


def parse_members(members: str) -> list[tuple[str, str]]:
    """
    Parse `«name»:«type»,[...]` into (name, type) pairs; a member without a type is an `int`.

    Members with an empty name are dropped.
    """
    parsed_members: list[tuple[str, str]] = []
    for member in split_csv(members):
        name, _, type_ = member.partition(':')
        name = name.strip()
        type_ = type_.strip()
        if name == '':
            continue
        if type_ == '':
            type_ = DEFAULT_MEMBER_TYPE
        parsed_members.append((name, type_))

    return parsed_members


def compute_constructor_argument(type_: str) -> str:
    if type_ == 'string':
        return '"hi"'
    if type_ == 'double':
        return '3.14'

    return '0'


def expand_record_members(values: dict[str, 'Value']) -> dict[str, 'Value']:
    """
    Build the definition of a class or struct with one field and one constructor parameter per member.
    """
    keyword = values['keyword']
    name = values['name']
    members = parse_members(values['members'])

    definition_lines = [f'{keyword} {name} {{', 'public:']
    definition_lines.extend(f'    {type_} {member_name};' for member_name, type_ in members)

    constructor_parameters = ', '.join(f'{type_} {member_name}_' for member_name, type_ in members)
    member_initialisers = ', '.join(f'{member_name}({member_name}_)' for member_name, _ in members)
    if member_initialisers == '':
        definition_lines.append(f'    {name}({constructor_parameters}) {{}}')
    else:
        definition_lines.append(f'    {name}({constructor_parameters}) : {member_initialisers} {{}}')
    definition_lines.append('};')

    return {
        'record_definition': '\n'.join(definition_lines),
        'constructor_arguments': ', '.join(compute_constructor_argument(type_) for _, type_ in members),
        'first_member': [member_name for member_name, _ in members[:1]],
        'string_includes': [
            'string'
            for member in split_csv(values['members'])
            if 'string' in member
        ],
    }


def expand_union_members(values: dict[str, 'Value']) -> dict[str, 'Value']:
    name = values['name']
    members = parse_members(values['members'])

    definition_lines = [f'union {name} {{']
    definition_lines.extend(f'    {type_} {member_name};' for member_name, type_ in members)
    definition_lines.append('};')

    return {
        'union_definition': '\n'.join(definition_lines),
        'first_member': [member_name for member_name, _ in members[:1]],
    }


def expand_cases(values: dict[str, 'Value']) -> dict[str, 'Value']:
    return {
        'case_values': split_csv(values['cases']),
    }


def expand_enumerators(values: dict[str, 'Value']) -> dict[str, 'Value']:
    enumerators = split_csv(values['enumerators'])
    return {
        'enumerator_list': ', '.join(enumerators),
        'first_enumerator': enumerators[0] if len(enumerators) > 0 else '',
    }


def select_constexpr_kind(values: dict[str, 'Value']) -> str:
    if '{' in values['expression']:
        return 'function'

    return 'value'


def build_fundamental_type_specification(default_value: str) -> 'HandlerSpecification':
    return HandlerSpecification(
        prompts=(
            Prompt('name', "Variable name for type '«keyword»'", 'x'),
            Prompt('initialiser', 'Initial value for «name»', default_value),
        ),
        declaration=Declaration('«keyword»', '«name»', '«initialiser»'),
        body=(
            '// («tag») Demonstrate type: «keyword»',
            '«declaration»',
            'cout << "«variable» = " << «variable» << endl;',
        ),
    )


AUTO_SPECIFICATION = HandlerSpecification(
    prompts=(
        Prompt('initialiser', 'Initializer expression for auto variable', '42', context_default='«last_var»'),
        Prompt('name', 'Variable name', 'v'),
    ),
    declaration=Declaration('auto', '«name»', '«initialiser»'),
    body=(
        '// («tag») Demonstrate auto (type deduction)',
        '«declaration»',
        'cout << "«variable» (deduced) = " << «variable» << endl;',
    ),
)

IF_ELSE_SPECIFICATION = HandlerSpecification(
    prompts=(
        Prompt('condition', 'Condition expression for if', 'x > 0', context_default='«last_var» > 0'),
        Prompt('then_statement', 'Then-branch (single statement)', 'cout << "then" << endl;'),
        Prompt('else_statement', 'Else-branch (single statement)', 'cout << "else" << endl;'),
    ),
    body=(
        '// («tag») Demonstrate if/else',
        'if («condition») {',
        '    «then_statement»',
        '} else {',
        '    «else_statement»',
        '}',
    ),
)

FOR_SPECIFICATION = HandlerSpecification(
    prompts=(
        Prompt('initialiser', 'Initializer for for-loop', 'int i = 0'),
        Prompt('condition', 'Condition for for-loop', 'i < 5'),
        Prompt('increment', 'Increment expression', '++i'),
        Prompt('statement', 'Body statement', 'cout << i << endl;'),
    ),
    loop_variable='initialiser',
    body=(
        '// («tag») Demonstrate for loop',
        '«initialiser»;',
        'for («initialiser»; «condition»; «increment») {',
        '    «statement»',
        '}',
    ),
)

WHILE_SPECIFICATION = HandlerSpecification(
    prompts=(
        Prompt('initialiser', 'Initializer (e.g., int n = 3)', 'int n = 3'),
        Prompt('condition', 'Condition', 'n-- > 0'),
        Prompt('statement', 'Loop body', 'cout << n << endl;'),
    ),
    loop_variable='initialiser',
    body=(
        '// («tag») Demonstrate while',
        '«initialiser»;',
        'while («condition») {',
        '    «statement»',
        '}',
    ),
)

DO_SPECIFICATION = HandlerSpecification(
    prompts=(
        Prompt('initialiser', 'Initializer (e.g., int n = 3)', 'int n = 3'),
        Prompt('condition', 'Condition (after body)', 'n-- > 0'),
        Prompt('statement', 'Loop body', 'cout << n << endl;'),
    ),
    loop_variable='initialiser',
    body=(
        '// («tag») Demonstrate do/while',
        '«initialiser»;',
        'do {',
        '    «statement»',
        '} while («condition»);',
    ),
)

SWITCH_SPECIFICATION = HandlerSpecification(
    prompts=(
        Prompt('initialiser', 'Initializer (e.g., int n = 2)', 'int n = 2'),
        Prompt('expression', 'Expression to switch on', 'n'),
        Prompt('cases', 'Comma-separated case values', '1,2,3'),
    ),
    expansions=(expand_cases,),
    body=(
        '// («tag») Demonstrate switch',
        '«initialiser»;',
        'switch («expression») {',
        '    case «case_values»: cout << "case «case_values»" << endl; break;',
        '    default: cout << "default" << endl; break;',
        '}',
    ),
)

RETURN_SPECIFICATION = HandlerSpecification(
    prompts=(
        Prompt('expression', 'Expression to return from main', '0'),
    ),
    body=(
        '// («tag») Demonstrate return',
        'cout << "About to return: " << («expression») << endl;',
        'return «expression»;',
    ),
)

RECORD_SPECIFICATION = HandlerSpecification(
    prompts=(
        Prompt('name', 'Name for «keyword»', 'MyType'),
        Prompt('members', 'Comma-separated members (name:type)', 'value:int'),
    ),
    expansions=(expand_record_members,),
    registered_type='«name»',
    includes=('«string_includes»',),
    top=('«record_definition»',),
    body=(
        '// («tag») Demonstrate «keyword»',
        '«name» obj(«constructor_arguments»);',
        'cout << "obj.«first_member» = " << obj.«first_member» << endl;',
    ),
)

UNION_SPECIFICATION = HandlerSpecification(
    prompts=(
        Prompt('name', 'Name for «keyword»', 'MyUnion'),
        Prompt('members', 'Comma-separated members (name:type)', 'value:int'),
    ),
    expansions=(expand_union_members,),
    registered_type='«name»',
    declaration=Declaration('«name»', '«name»_u', '{}'),
    top=('«union_definition»',),
    body=(
        '// («tag») Demonstrate union',
        '«declaration»',
        '«variable».«first_member» = 123;',
        'cout << "«variable».«first_member» = " << «variable».«first_member» << endl;',
    ),
)

ENUM_SPECIFICATION = HandlerSpecification(
    prompts=(
        Prompt('name', 'Enum name', 'Color'),
        Prompt('enumerators', 'Comma-separated enumerators', 'Red,Green,Blue'),
    ),
    expansions=(expand_enumerators,),
    registered_type='«name»',
    top=('enum class «name» { «enumerator_list» };',),
    body=(
        '// («tag») Demonstrate enum',
        '«name» c = «name»::«first_enumerator»;',
        'cout << static_cast<int>(c) << endl;',
    ),
)

TEMPLATE_SPECIFICATION = HandlerSpecification(
    prompts=(
        Prompt('kind', "Template kind ('function' or 'class')", 'function'),
    ),
    selector=select_answer('kind'),
    variants={
        'class': HandlerSpecification(
            prompts=(
                Prompt('name', 'Template class name', 'Box'),
                Prompt('type_parameter', 'Type parameter name', 'T'),
            ),
            registered_type='«name»',
            top=(
                'template <typename «type_parameter»>\n'
                'struct «name» { «type_parameter» value; «name»(«type_parameter» v) : value(v) {} };',
            ),
            body=(
                '// («tag») Demonstrate class template',
                '«name»<int> b(5);',
                'cout << b.value << endl;',
            ),
        ),
        DEFAULT_VARIANT: HandlerSpecification(
            prompts=(
                Prompt('name', 'Template function name', 'add'),
                Prompt('type_parameter', 'Type parameter name', 'T'),
            ),
            top=(
                'template <typename «type_parameter»>\n'
                '«type_parameter» «name»(«type_parameter» a, «type_parameter» b) { return a + b; }',
            ),
            body=(
                '// («tag») Demonstrate function template',
                'cout << «name»(2, 3) << endl;',
            ),
        ),
    },
)

CAST_SPECIFICATIONS = {
    'static_cast': HandlerSpecification(
        prompts=(
            Prompt('source', 'Source expression (e.g., 3.14)', '3.14'),
            Prompt('target', 'Target type (e.g., int)', 'int'),
        ),
        body=(
            '// («tag») Demonstrate static_cast',
            '«target» v = static_cast<«target»>(«source»);',
            'cout << v << endl;',
        ),
    ),
    'dynamic_cast': HandlerSpecification(
        top=(
            'struct Base { virtual ~Base() = default; };',
            'struct Derived : Base { int x = 42; };',
        ),
        body=(
            '// («tag») Demonstrate dynamic_cast',
            'Base* b = new Derived();',
            'if (Derived* d = dynamic_cast<Derived*>(b)) {',
            '    cout << "dynamic_cast succeeded: " << d->x << endl;',
            '} else {',
            '    cout << "dynamic_cast failed" << endl;',
            '}',
            'delete b;',
        ),
    ),
    'const_cast': HandlerSpecification(
        body=(
            '// («tag») Demonstrate const_cast (illustrative)',
            'const int ci = 10;',
            'int &r = const_cast<int&>(ci);',
            'r = 20; // undefined behavior but illustrative',
            'cout << "ci (after const_cast attempt) = " << ci << endl;',
        ),
    ),
    'reinterpret_cast': HandlerSpecification(
        body=(
            '// («tag») Demonstrate reinterpret_cast',
            'int x = 0x12345678;',
            'char* p = reinterpret_cast<char*>(&x);',
            'cout << "First byte (interpretation): " << static_cast<int>(p[0]) << endl;',
        ),
    ),
}

NEW_DELETE_SPECIFICATION = HandlerSpecification(
    prompts=(
        Prompt('type_', 'Type to allocate', 'int'),
        Prompt('initialiser', 'Initial value', '42'),
    ),
    body=(
        '// («tag») Demonstrate new/delete',
        '«type_»* p = new «type_»(«initialiser»);',
        'cout << "*p = " << *p << endl;',
        'delete p;',
    ),
)

OPERATOR_PLUS_DEFINITION = 'Point operator+(const Point& a, const Point& b) { return Point(a.x + b.x, a.y + b.y); }'
OPERATOR_PLUS_USAGE = (
    'Point a(1,2), b(3,4);',
    'Point c = a + b;',
    'cout << "c = (" << c.x << "," << c.y << ")" << endl;',
)

OPERATOR_SPECIFICATION = HandlerSpecification(
    prompts=(
        Prompt('operator', 'Operator to demonstrate/overload (e.g. +, <<)', '+'),
    ),
    top=('struct Point { int x, y; Point(int x_, int y_):x(x_),y(y_){} };',),
    selector=select_answer('operator'),
    variants={
        '+': HandlerSpecification(
            top=(OPERATOR_PLUS_DEFINITION,),
            body=('// («tag») Demonstrate operator+', *OPERATOR_PLUS_USAGE),
        ),
        '<<': HandlerSpecification(
            top=(
                'std::ostream& operator<<(std::ostream& os, const Point& p) '
                "{ return os << '(' << p.x << ',' << p.y << ')'; }",
            ),
            body=(
                '// («tag») Demonstrate operator<<',
                'Point a(1,2), b(3,4);',
                'cout << a << " " << b << endl;',
            ),
        ),
        DEFAULT_VARIANT: HandlerSpecification(
            top=(
                '// («tag») Operator not specially implemented; showing operator+ instead',
                OPERATOR_PLUS_DEFINITION,
            ),
            body=OPERATOR_PLUS_USAGE,
        ),
    },
)

EXCEPTION_SPECIFICATION = HandlerSpecification(
    prompts=(
        Prompt('message', 'Exception message to throw', 'Something went wrong'),
    ),
    includes=('stdexcept',),
    body=(
        '// («tag») Demonstrate try/catch/throw',
        'try {',
        '    throw std::runtime_error("«message»");',
        '} catch (const std::exception& e) {',
        '    cout << "Caught: " << e.what() << endl;',
        '}',
    ),
)

CONSTEXPR_SPECIFICATION = HandlerSpecification(
    prompts=(
        Prompt('expression', 'Provide either a constexpr function or a constant expression',
               'int square(int x){return x*x;}'),
    ),
    selector=select_constexpr_kind,
    variants={
        'function': HandlerSpecification(
            top=('constexpr «expression»',),
            body=(
                '// («tag») Demonstrate constexpr function',
                'cout << square(5) << endl;',
            ),
        ),
        DEFAULT_VARIANT: HandlerSpecification(
            body=(
                '// («tag») Demonstrate constexpr value',
                'constexpr auto v = «expression»;',
                'cout << v << endl;',
            ),
        ),
    },
)

STATIC_ASSERT_SPECIFICATION = HandlerSpecification(
    prompts=(
        Prompt('condition', 'Condition to assert at compile time', 'sizeof(int) >= 4'),
        Prompt('message', 'Message for static_assert', 'int_size_ok'),
    ),
    top=('static_assert(«condition», "«message»");',),
    body=(
        '// («tag») static_assert present above; runtime note:',
        'cout << "static_assert present; program compiled successfully" << endl;',
    ),
)

ALIGNMENT_SPECIFICATION = HandlerSpecification(
    top=('struct alignas(32) Aligned { char data[64]; };',),
    body=(
        '// («tag») Demonstrate alignas/alignof',
        'Aligned a;',
        'cout << "alignof(Aligned) = " << alignof(Aligned) << endl;',
    ),
)

THREAD_LOCAL_SPECIFICATION = HandlerSpecification(
    prompts=(
        Prompt('name', 'Thread-local variable name', 'counter'),
        Prompt('initialiser', 'Initial value', '0'),
    ),
    top=('thread_local int «name» = «initialiser»;',),
    body=(
        '// («tag») Demonstrate thread_local',
        'cout << "«name» = " << «name» << endl;',
    ),
)

MUTABLE_SPECIFICATION = HandlerSpecification(
    prompts=(
        Prompt('member', 'Mutable member name', 'cached'),
    ),
    top=('struct S { mutable int «member» = 0; int value = 0; int get() const { return «member» = value; } };',),
    body=(
        '// («tag») Demonstrate mutable',
        'S s{0, 7};',
        'cout << "get() = " << s.get() << endl;',
    ),
)

INTROSPECTION_SPECIFICATION = HandlerSpecification(
    prompts=(
        Prompt('expression', 'Expression or type to inspect', 'int'),
    ),
    includes=('typeinfo',),
    body=(
        '// («tag») Demonstrate sizeof and typeid',
        'cout << "sizeof(«expression») = " << sizeof(«expression») << endl;',
        'cout << "typeid(«expression»).name() = " << typeid(«expression»).name() << endl;',
    ),
)

BOOLEAN_ALTERNATIVE_TOKEN_SPECIFICATION = HandlerSpecification(
    prompts=(
        Prompt('expression', 'A simple Boolean expression (you may use alternative tokens)', 'x > 0 and y > 0',
               context_default='«last_var» > 0 and true'),
    ),
    body=(
        "// («tag») Demonstrate alternative tokens like 'and'/'or'/'not'",
        'int x = 1, y = 2;',
        'if («expression») cout << "expression true" << endl; else cout << "expression false" << endl;',
    ),
)

OTHER_ALTERNATIVE_TOKEN_SPECIFICATION = HandlerSpecification(
    body=(
        '// («tag») Demonstrate alternative token: «keyword»',
        'cout << "Alternative token: «keyword»" << endl;',
    ),
)

SPECIFICATION_FROM_KEYWORD: dict[str, 'HandlerSpecification'] = {
    **{
        keyword: build_fundamental_type_specification(default_value)
        for keyword, default_value in FUNDAMENTAL_TYPE_DEFAULT_VALUES.items()
    },
    'auto': AUTO_SPECIFICATION,
    'if': IF_ELSE_SPECIFICATION,
    'else': IF_ELSE_SPECIFICATION,
    'for': FOR_SPECIFICATION,
    'while': WHILE_SPECIFICATION,
    'do': DO_SPECIFICATION,
    'switch': SWITCH_SPECIFICATION,
    'return': RETURN_SPECIFICATION,
    'class': RECORD_SPECIFICATION,
    'struct': RECORD_SPECIFICATION,
    'union': UNION_SPECIFICATION,
    'enum': ENUM_SPECIFICATION,
    'template': TEMPLATE_SPECIFICATION,
    **CAST_SPECIFICATIONS,
    'new': NEW_DELETE_SPECIFICATION,
    'delete': NEW_DELETE_SPECIFICATION,
    'operator': OPERATOR_SPECIFICATION,
    'try': EXCEPTION_SPECIFICATION,
    'catch': EXCEPTION_SPECIFICATION,
    'throw': EXCEPTION_SPECIFICATION,
    'constexpr': CONSTEXPR_SPECIFICATION,
    'static_assert': STATIC_ASSERT_SPECIFICATION,
    'alignas': ALIGNMENT_SPECIFICATION,
    'alignof': ALIGNMENT_SPECIFICATION,
    'thread_local': THREAD_LOCAL_SPECIFICATION,
    'mutable': MUTABLE_SPECIFICATION,
    'sizeof': INTROSPECTION_SPECIFICATION,
    'typeid': INTROSPECTION_SPECIFICATION,
    **{
        keyword: BOOLEAN_ALTERNATIVE_TOKEN_SPECIFICATION
        for keyword in BOOLEAN_ALTERNATIVE_TOKENS
    },
    **{
        keyword: OTHER_ALTERNATIVE_TOKEN_SPECIFICATION
        for keyword in OTHER_ALTERNATIVE_TOKENS
    },
}


def lookup_specification(keyword: str) -> Optional['HandlerSpecification']:
    return SPECIFICATION_FROM_KEYWORD.get(keyword)
